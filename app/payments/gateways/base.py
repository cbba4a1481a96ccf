"""
Base class for payment gateways.

A Gateway holds what every provider integration shares:
- Identity: name (used in URLs and logs), provider and description
- Configuration: production and test key sets read from settings
- Services supported (checkout, terms, ...)
- Enabled flag, including the store currency check
- Webhook URL building and the thank-you page variables

Configuration (via settings), for a gateway with settings_prefix "PAYLIKE":
- PAYLIKE_ENABLED: Master switch (default: True)
- PAYLIKE_TEST_MODE: Use the test key set (default: True)
- PAYLIKE_<KEY>: Production value for each name in config_keys
- PAYLIKE_TEST_<KEY>: Test value for each name in config_keys

Usage:
    class MyGateway(Gateway):
        name = "mygateway"
        settings_prefix = "MYGATEWAY"
        config_keys = ("api_key",)

    gateway = MyGateway()
    gateway.get_config("api_key")  # MYGATEWAY_TEST_API_KEY in test mode
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

from django.conf import settings
from django.urls import reverse

if TYPE_CHECKING:
    from shop.models import Order


@dataclass
class CheckoutContext:
    """
    Per-request state shared by the gateways rendering one checkout page.

    Gateways add the provider scripts they need here instead of emitting
    them directly, so a script is linked once per page however many
    buttons need it.

    Attributes:
        link_scripts: Script URLs to link in the page, in insertion order
    """

    link_scripts: list[str] = field(default_factory=list)

    def add_link_script(self, url: str) -> bool:
        """
        Add a script URL unless it is already linked.

        Returns:
            True if the script was added, False if it was already present
        """
        if url in self.link_scripts:
            return False
        self.link_scripts.append(url)
        return True


class Gateway:
    """
    Base payment gateway.

    Subclasses set the class attributes and override the checkout and
    provider operations they support.

    Attributes:
        name: Gateway ID used in URLs, logs and Payment.gateway
        provider: Provider company name
        description: Name shown to buyers
        version: Gateway version
        settings_prefix: Prefix of the gateway's settings names
        config_keys: Keys that exist in both production and test key sets
        services: Services the gateway supports
        supported_currencies: Allowed store currencies (None = any)
        form_method: HTTP method used by the checkout form
    """

    name: str = ""
    provider: str = ""
    description: str = ""
    version: str = ""
    settings_prefix: str = ""
    config_keys: tuple[str, ...] = ()
    services: dict[str, bool] = {}
    supported_currencies: frozenset[str] | None = None
    form_method: str = "post"

    def __init__(self) -> None:
        self.currency_code = getattr(settings, "SHOP_CURRENCY", "USD")
        self.test_mode = bool(self._setting("TEST_MODE", True))
        self.enabled = bool(self._setting("ENABLED", True))

        # A gateway that cannot charge in the store currency is unusable
        if (
            self.supported_currencies is not None
            and self.currency_code not in self.supported_currencies
        ):
            self.enabled = False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, enabled={self.enabled})"

    # =========================================================================
    # Configuration
    # =========================================================================

    def _setting(self, suffix: str, default: Any = None) -> Any:
        return getattr(settings, f"{self.settings_prefix}_{suffix}", default)

    def get_config(self, key: str) -> str:
        """
        Get a configuration value for the active environment.

        Args:
            key: One of config_keys (e.g. "public_key")

        Returns:
            The test value in test mode, the production value otherwise
            ("" when unset)
        """
        if key not in self.config_keys:
            raise KeyError(f"{self.name} has no config key {key!r}")
        env_prefix = "TEST_" if self.test_mode else ""
        return self._setting(f"{env_prefix}{key.upper()}", "") or ""

    def has_valid_config(self) -> bool:
        """Check that every configuration key has a value."""
        return all(self.get_config(key) for key in self.config_keys)

    def supports(self, service: str) -> bool:
        """Check whether the gateway offers a service (e.g. "checkout")."""
        return bool(self.services.get(service, False))

    # =========================================================================
    # URLs & Display
    # =========================================================================

    def get_main_url(self) -> str:
        """Provider home page where buyers can check their purchase."""
        return ""

    def get_method(self) -> str:
        """Form method for the final checkout button."""
        return self.form_method

    def get_webhook_url(self, params: dict[str, Any] | None = None) -> str:
        """
        Build the absolute URL of this gateway's webhook endpoint.

        Args:
            params: Query parameters to append

        Returns:
            URL under SITE_URL, with the encoded parameters
        """
        url = f"{settings.SITE_URL.rstrip('/')}{reverse(f'payments:{self.name}_webhook')}"
        if params:
            url = f"{url}?{urlencode(params)}"
        return url

    def thanks_vars(self) -> dict[str, str]:
        """Values shown in the thank-you message after a purchase."""
        return {
            "gateway_url": self.get_main_url(),
            "gateway_name": self.description,
        }

    def ipn_log_vars(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Gateway-specific values to display with a logged notification.

        Args:
            data: The logged notification payload

        Returns:
            Name/value pairs for display (none by default)
        """
        return {}

    # =========================================================================
    # Checkout
    # =========================================================================

    def gateway_vars(self, order: Order, context: CheckoutContext) -> str:
        """Markup for the purchase button. Empty if checkout is unsupported."""
        return ""

    def get_checkout_js(self, order: Order) -> str:
        """JavaScript to attach to the checkout button's onclick."""
        return ""
