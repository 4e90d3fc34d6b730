from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Generator
from dataclasses import dataclass, field
from typing import Annotated, ClassVar, Protocol

import pytest

from beanprobe.cache import descriptor_cache
from beanprobe.markers import PropIgnore, Transient, prop_ignore, transient


class Account:
    _owner: str
    _balance: float
    _is_frozen: bool
    _verified: bool

    def __init__(self, owner: str = "", balance: float = 0.0) -> None:
        self._owner = owner
        self._balance = balance
        self._is_frozen = False
        self._verified = False

    def get_owner(self) -> str:
        return self._owner

    def set_owner(self, owner: str) -> None:
        self._owner = owner

    def getBalance(self) -> float:
        return self._balance

    def setBalance(self, balance: float) -> None:
        self._balance = balance

    def is_frozen(self) -> bool:
        return self._is_frozen

    def set_frozen(self, frozen: bool) -> None:
        self._is_frozen = frozen

    def is_verified(self) -> bool:
        return self._verified

    def set_verified(self, verified: bool) -> None:
        self._verified = verified

    def get_class(self) -> str:
        return "account"

    def close(self, reason: str, notify: bool) -> str:
        return f"{self._owner} closed: {reason}"

    def describe(self, prefix: str = "") -> str:
        return f"{prefix}{self._owner}"


@dataclass
class Person:
    name: str = ""
    age: int = 0
    email: str | None = None
    tags: list[str] = field(default_factory=list)
    password: Annotated[str, PropIgnore] = ""
    nick: str = field(default="", metadata={"alias": "nickname"})
    MAX_AGE: ClassVar[int] = 150


@dataclass
class Employee(Person):
    employee_id: int = 0
    manager: bool = False


@dataclass
class Team:
    title: str = ""
    lead: Person | None = None


@dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0


class Temperature:
    _celsius: float

    def __init__(self, celsius: float = 0.0) -> None:
        self._celsius = celsius

    @property
    def celsius(self) -> float:
        return self._celsius

    @celsius.setter
    def celsius(self, value: float) -> None:
        self._celsius = value

    @property
    def fahrenheit(self) -> float:
        return self._celsius * 9 / 5 + 32


class Fragile:
    value: int
    size: int

    def __init__(self) -> None:
        self.value = 1
        self.size = 2

    def get_value(self) -> int:
        raise RuntimeError("boom")

    def set_size(self, size: int) -> None:
        raise RuntimeError("read only")


class Session:
    token: str
    audit: Annotated[str, Transient]
    _internal: int

    def __init__(self) -> None:
        self.token = "t"
        self.audit = "a"
        self._internal = 7

    @prop_ignore
    def get_token(self) -> str:
        return self.token

    def set_token(self, token: str) -> None:
        self.token = token

    @transient
    def get_internal(self) -> int:
        return self._internal


class Classic:
    def __init__(self) -> None:
        self._name = ""
        self._active = False

    def get_name(self) -> str:
        return self._name

    def set_name(self, name: str) -> None:
        self._name = name

    def isActive(self) -> bool:
        return self._active

    def setActive(self, active: bool) -> None:
        self._active = active

    def get_label(self) -> str:
        return f"<{self._name}>"

    def getaway(self) -> str:
        return "away"

    def settle(self, amount: int) -> None:
        pass


class SlotBean:
    __slots__ = ("left", "right", "_hidden")

    def __init__(self) -> None:
        self.left = 1
        self.right = 2
        self._hidden = 3


class UserView(Protocol):
    def get_age(self) -> int: ...

    def getUserName(self) -> str: ...

    def is_admin(self) -> bool: ...

    def set_age(self, age: int) -> None: ...

    def compute(self) -> int: ...


class Settings(ABC):
    @abstractmethod
    def get_timeout(self) -> float: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    def level(self) -> int:
        return 0

    @level.setter
    def level(self, value: int) -> None:
        raise NotImplementedError


@pytest.fixture(autouse=True)
def clean_descriptor_cache() -> Generator[None, None, None]:
    descriptor_cache.clear()
    yield
    descriptor_cache.clear()


@pytest.fixture
def account() -> Account:
    return Account("alice", 10.5)


@pytest.fixture
def person() -> Person:
    return Person(
        name="Bob",
        age=41,
        email="bob@example.com",
        tags=["a", "b"],
        password="hunter2",
        nick="bobby",
    )
