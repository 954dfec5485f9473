from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Money:
    value: Decimal

    def __post_init__(self):
        if self.value < 0:
            raise ValueError(f"Money cannot be negative: {self.value}")

    def __add__(self, other: "Money") -> "Money":
        return Money(self.value + other.value)

    def __sub__(self, other: "Money") -> "Money":
        return Money(self.value - other.value)

    def __mul__(self, other: Decimal) -> "Money":
        return Money(self.value * other)

    def __str__(self) -> str:
        return str(self.value)

    def is_zero(self) -> bool:
        return self.value == 0

    @classmethod
    def zero(cls) -> "Money":
        return cls(Decimal("0"))
