"""Client-credentials token acquisition against Azure AD via MSAL."""

import logging
from typing import Protocol

import msal

from webclient.config.schema import AzureAdOptions
from webclient.helpers.errors import TokenAcquisitionError

logger = logging.getLogger(__name__)

# Process-wide cache shared by every provider, like ADAL's TokenCache.DefaultShared
DEFAULT_SHARED_CACHE = msal.TokenCache()


class TokenProvider(Protocol):
    def get_access_token(self) -> str: ...


class ClientCredentialsTokenProvider:
    """Acquires app-only tokens for ``options.audience`` with the client secret.

    The authority is ``options.instance`` formatted with ``options.tenant``.
    Tokens come from the shared cache when still valid; otherwise MSAL
    performs the client-credentials grant. Network errors raised by MSAL
    propagate unchanged.
    """

    def __init__(
        self,
        options: AzureAdOptions,
        token_cache: msal.TokenCache | None = None,
    ):
        self.options = options
        self.token_cache = token_cache if token_cache is not None else DEFAULT_SHARED_CACHE

    def _application(self) -> msal.ConfidentialClientApplication:
        return msal.ConfidentialClientApplication(
            client_id=self.options.client_id,
            client_credential=self.options.client_secret.get_secret_value(),
            authority=self.options.authority,
            token_cache=self.token_cache,
        )

    def get_access_token(self) -> str:
        app = self._application()
        scopes = self.options.scopes

        result = app.acquire_token_for_client(scopes=scopes)

        access_token = result.get("access_token") if isinstance(result, dict) else None
        if not access_token:
            error = result.get("error") if isinstance(result, dict) else "unknown_error"
            desc = result.get("error_description") if isinstance(result, dict) else ""
            logger.error(
                "Token acquisition failed for client=%s authority=%s: %s",
                self.options.client_id, self.options.authority, error,
            )
            raise TokenAcquisitionError(
                f"Failed to acquire access token: {error} {desc}".strip(),
                error=error,
                error_description=desc,
            )

        logger.info(
            "Acquired access token for client=%s scopes=%s (source=%s)",
            self.options.client_id, scopes,
            result.get("token_source", "identity_provider"),
        )
        return access_token
