import random
import string
import time
import uuid
from collections.abc import Callable, Sequence
from typing import TypeVar

T = TypeVar("T")

DAY_SECONDS = 24 * 60 * 60

FIRST_NAMES = [
    "Ana", "Bruno", "Camila", "Daniel", "Eduarda", "Felipe", "Gabriela", "Heitor",
    "Isabela", "João", "Larissa", "Marcos", "Natália", "Otávio", "Paula", "Rafael",
    "Sarah", "Thiago", "Valentina", "William", "Emily", "Michael", "Jessica", "David",
]

LAST_NAMES = [
    "Silva", "Santos", "Oliveira", "Souza", "Lima", "Pereira", "Costa", "Almeida",
    "Ferreira", "Rodrigues", "Smith", "Johnson", "Brown", "Garcia", "Miller", "Davis",
]

EMAIL_DOMAINS = ["gmail.com", "hotmail.com", "yahoo.com", "outlook.com", "example.com"]

DOMAIN_WORDS = [
    "acme", "lojinha", "pagafacil", "northwind", "contoso", "globex", "initech",
    "umbrella", "vandelay", "tecnoshop", "mercadao", "brightside",
]

TLDS = ["com", "com.br", "io", "net", "store"]

STREET_NAMES = [
    "Rua das Flores", "Avenida Paulista", "Rua Augusta", "Main Street", "Oak Avenue",
    "Park Drive", "Rua XV de Novembro", "Elm Street", "Avenida Brasil", "Maple Lane",
]

CITIES = [
    ("São Paulo", "SP", "BR"), ("Rio de Janeiro", "RJ", "BR"), ("Curitiba", "PR", "BR"),
    ("Belo Horizonte", "MG", "BR"), ("New York", "NY", "US"), ("Austin", "TX", "US"),
    ("Seattle", "WA", "US"), ("Lisboa", "LX", "PT"), ("Berlin", "BE", "DE"),
    ("Madrid", "MD", "ES"),
]

PRODUCT_ADJECTIVES = [
    "Ergonomic", "Rustic", "Handcrafted", "Sleek", "Incredible", "Practical",
    "Refined", "Gorgeous", "Intelligent", "Licensed",
]

PRODUCT_MATERIALS = ["Steel", "Wooden", "Cotton", "Granite", "Rubber", "Bronze", "Fresh"]

PRODUCT_NOUNS = ["Chair", "Keyboard", "Shoes", "Table", "Gloves", "Bike", "Hat", "Pizza"]


class RandomSource:
    """
    Randomized-value generator threaded into every synthesis call.

    All values come from a private random.Random instance so that a seeded
    source reproduces the same deliveries. The clock is injectable and used
    only for date generation.
    """

    def __init__(self, seed: int | None = None, clock: Callable[[], float] = time.time) -> None:
        self._rng = random.Random(seed)
        self._clock = clock

    def spawn(self) -> "RandomSource":
        """Independent source seeded from this one, sharing its clock."""
        return RandomSource(seed=self._rng.getrandbits(64), clock=self._clock)

    def now(self) -> int:
        return int(self._clock())

    def pick(self, options: Sequence[T]) -> T:
        return self._rng.choice(options)

    def integer(self, low: int, high: int) -> int:
        """Uniform integer in the inclusive range [low, high]."""
        return self._rng.randint(low, high)

    def alphanumeric(self, length: int) -> str:
        alphabet = string.ascii_letters + string.digits
        return "".join(self._rng.choices(alphabet, k=length))

    def hexadecimal(self, length: int) -> str:
        return "".join(self._rng.choices("0123456789abcdef", k=length))

    def uuid4(self) -> str:
        return str(uuid.UUID(int=self._rng.getrandbits(128), version=4))

    # ── Dates (unix seconds) ──────────────────────────────────────────────────

    def past(self, days: int = 365) -> int:
        return self.now() - self._rng.randint(1, days * DAY_SECONDS)

    def future(self, days: int = 365) -> int:
        return self.now() + self._rng.randint(1, days * DAY_SECONDS)

    def recent(self, days: int = 1) -> int:
        return self.past(days)

    # ── People and contact details ────────────────────────────────────────────

    def full_name(self) -> str:
        return f"{self.pick(FIRST_NAMES)} {self.pick(LAST_NAMES)}"

    def email(self) -> str:
        first = self.pick(FIRST_NAMES).lower()
        last = self.pick(LAST_NAMES).lower()
        suffix = self.integer(1, 999)
        return f"{first}.{last}{suffix}@{self.pick(EMAIL_DOMAINS)}"

    def phone(self) -> str:
        return f"+55 {self.integer(11, 99)} 9{self.integer(1000, 9999)}-{self.integer(1000, 9999)}"

    def domain_name(self) -> str:
        return f"{self.pick(DOMAIN_WORDS)}.{self.pick(TLDS)}"

    # ── Addresses ─────────────────────────────────────────────────────────────

    def street_address(self) -> str:
        return f"{self.pick(STREET_NAMES)}, {self.integer(1, 9999)}"

    def city(self) -> tuple[str, str, str]:
        """Return a (city, state, country_code) triple that belongs together."""
        return self.pick(CITIES)

    def postal_code(self) -> str:
        return f"{self.integer(10000, 99999)}-{self.integer(100, 999)}"

    # ── Commerce ──────────────────────────────────────────────────────────────

    def product_name(self) -> str:
        return " ".join(
            (self.pick(PRODUCT_ADJECTIVES), self.pick(PRODUCT_MATERIALS), self.pick(PRODUCT_NOUNS))
        )

    def card_last4(self) -> str:
        return f"{self.integer(0, 9999):04d}"
