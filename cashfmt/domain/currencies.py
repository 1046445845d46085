"""Static currency precision registry.

Maps each supported currency code to its canonical number of decimal places.
Fiat currencies use their ISO 4217 minor units; crypto currencies use the
precision the cashier displays for them.
"""

from typing import Final

from cashfmt.domain.models import CurrencyCode

DEFAULT_CURRENCY: Final = CurrencyCode("USD")

CURRENCY_PRECISION: Final[dict[str, int]] = {
    # Fiat
    "AUD": 2,
    "EUR": 2,
    "GBP": 2,
    "USD": 2,
    "JPY": 0,
    # Crypto
    "BTC": 8,
    "ETH": 8,
    "LTC": 8,
    "USDC": 2,
    "UST": 2,
    "eUSDT": 2,
    "tUSDT": 2,
}


def get_precision(currency: str, registry: dict[str, int] | None = None) -> int:
    """Look up the default decimal places for a currency.

    Args:
        currency: Currency code.
        registry: Precision table to use. Defaults to CURRENCY_PRECISION.

    Returns:
        Number of decimal places.

    Raises:
        KeyError: If the currency is not registered.
    """
    table = CURRENCY_PRECISION if registry is None else registry
    return table[currency]
