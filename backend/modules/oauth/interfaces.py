"""
OAuth module interface.

The login pipeline talks to every identity provider through IOAuthProvider,
not the concrete implementations. Each provider (OpenID, GitLab, ...)
supplies its own implementation and registers it at startup.
"""

from typing import Any, Protocol, Optional, Union, runtime_checkable

from shared.config import Settings, SSOSettings
from shared.models import User


@runtime_checkable
class IOAuthProvider(Protocol):
    """
    Interface for identity provider adapters.

    This protocol defines the contract that each provider exposes
    to the login pipeline. Implementations must provide all these methods.
    """

    def get_user_from_json(
        self,
        data: Union[bytes, str, Any],
        token_user: Optional[User] = None,
        settings: Optional[SSOSettings] = None,
    ) -> User:
        """
        Build a user record from a provider's userinfo response.

        Args:
            data: Raw response body (bytes, str or a readable stream)
            token_user: User already derived from an ID token, if any
            settings: The provider's SSO settings

        Returns:
            A new, unsaved User

        Raises:
            AuthenticationError: If the response cannot be decoded
            ValidationError: If a required claim is missing
        """
        ...

    def get_sso_settings(self, config: Settings, service: str) -> SSOSettings:
        """
        Get this provider's section of the application settings.

        Args:
            config: Full application settings
            service: Identity service tag the caller is resolving

        Returns:
            The provider's SSOSettings
        """
        ...

    def get_user_from_id_token(self, id_token: str) -> Optional[User]:
        """
        Build a user record from an ID token.

        Returns:
            User if the provider supports ID-token identity, None otherwise
        """
        ...

    def is_same_user(self, db_user: User, oauth_user: User) -> bool:
        """
        Check whether a stored user and a freshly mapped user are the same account.
        """
        ...
