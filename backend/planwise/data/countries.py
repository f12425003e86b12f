"""Country reference data: currency, cities, providers and map view per country."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Currency:
    code: str
    name: str
    symbol: str


@dataclass(frozen=True)
class Country:
    code: str              # ISO 3166-1 alpha-2
    name: str
    currency: Currency
    cities: tuple[str, ...]
    providers: tuple[str, ...]
    lat: float             # map centre
    lng: float
    zoom: int              # initial map zoom, also scales coverage zones

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "name": self.name,
            "currency": {
                "code": self.currency.code,
                "name": self.currency.name,
                "symbol": self.currency.symbol,
            },
            "cities": list(self.cities),
            "providers": list(self.providers),
            "lat": self.lat,
            "lng": self.lng,
            "zoom": self.zoom,
        }


COUNTRIES: tuple[Country, ...] = (
    Country(
        code="US",
        name="United States",
        currency=Currency("USD", "United States Dollar", "$"),
        cities=("New York", "Los Angeles", "Chicago", "Houston", "Phoenix"),
        providers=("Verizon", "AT&T", "T-Mobile"),
        lat=37.0902,
        lng=-95.7129,
        zoom=4,
    ),
    Country(
        code="CA",
        name="Canada",
        currency=Currency("CAD", "Canadian Dollar", "$"),
        cities=("Toronto", "Montreal", "Vancouver", "Calgary", "Ottawa"),
        providers=("Rogers", "Bell", "Telus"),
        lat=56.1304,
        lng=-106.3468,
        zoom=4,
    ),
    Country(
        code="GB",
        name="United Kingdom",
        currency=Currency("GBP", "British Pound", "£"),
        cities=("London", "Manchester", "Birmingham", "Glasgow", "Liverpool"),
        providers=("EE", "O2", "Vodafone", "Three"),
        lat=55.3781,
        lng=-3.4360,
        zoom=5,
    ),
    Country(
        code="AU",
        name="Australia",
        currency=Currency("AUD", "Australian Dollar", "$"),
        cities=("Sydney", "Melbourne", "Brisbane", "Perth", "Adelaide"),
        providers=("Telstra", "Optus", "Vodafone"),
        lat=-25.2744,
        lng=133.7751,
        zoom=4,
    ),
    Country(
        code="IN",
        name="India",
        currency=Currency("INR", "Indian Rupee", "₹"),
        cities=("Mumbai", "Delhi", "Bangalore", "Hyderabad", "Chennai"),
        providers=("Jio", "Airtel", "Vodafone Idea"),
        lat=20.5937,
        lng=78.9629,
        zoom=5,
    ),
)

DEFAULT_COUNTRY = COUNTRIES[0]
DEFAULT_CURRENCY_SYMBOL = "$"

_BY_CODE: dict[str, Country] = {c.code: c for c in COUNTRIES}


def get_country(code: str) -> Country | None:
    """Look up a country by its two-letter code (case-insensitive)."""
    if not code:
        return None
    return _BY_CODE.get(code.upper())


def search_countries(query: str) -> list[Country]:
    """Countries whose name contains the query, case-insensitive. Empty query matches nothing."""
    if not query:
        return []
    q = query.lower()
    return [c for c in COUNTRIES if q in c.name.lower()]
