from bootstrap import startup
from modules.oauth import OAuthProviderRegistry, OpenIDProvider, get_registry
from shared.config import Settings


class TestStartup:
    def test_registers_providers_in_given_registry(self):
        """startup should populate the registry it is given."""
        registry = OAuthProviderRegistry()
        result = startup(Settings(), registry)
        assert result is registry
        assert isinstance(registry.get("openid"), OpenIDProvider)

    def test_uses_default_registry(self):
        """Without arguments the process-wide registry is populated."""
        startup()
        assert "openid" in get_registry()
