"""Classes reflected by the test suite.

They live in a module of their own so they can be loaded by qualified name,
for example ``tests.sample_classes.Base``.
"""

import abc
import dataclasses
from typing import Annotated, ClassVar, Final, Optional, Protocol, Self, final

from factoryrefl import attribute


# Attribute classes


class Service:
    def __init__(self, name, scope="app"):
        self.name = name
        self.scope = scope


class PrimaryService(Service):
    pass


class Inject:
    def __init__(self, name):
        self.name = name


class Faulty:
    def __init__(self):
        raise ValueError("faulty attribute")


# Interfaces


class Greeter(Protocol):
    def greet(self, name: str) -> str: ...


class NamedGreeter(Greeter, Protocol):
    def name(self) -> str: ...


class Closeable(abc.ABC):
    @abc.abstractmethod
    def close(self) -> None: ...


class EnglishGreeter(Greeter):
    def greet(self, name: str) -> str:
        return f"Hello {name}"


class Resource(Greeter, Closeable):
    def greet(self, name: str) -> str:
        return name

    def close(self) -> None:
        pass


class Repository(abc.ABC):
    """Marker interface without any members."""


class SqlRepository(Repository):
    def __init__(self, dsn: str):
        self.dsn = dsn


class CachedRepository(SqlRepository):
    pass


class Handler(abc.ABC):
    def __call__(self, event):
        return event


# Classes and inheritance


@attribute(Service, "base")
class Base:
    label = "base"
    size: int = 0

    def __init__(self, name: str, size: int = 0):
        self.name = name
        self.size = size

    @classmethod
    def make(cls) -> Self:
        return cls("made")

    def clone(self) -> "Base":
        return Base(self.name, self.size)

    def copyTo(self, other: Self) -> None:
        other.size = self.size

    def merge(self, other: "Base") -> "Base":
        return other

    def describe(self) -> str:
        return self.name

    def widget(self) -> "Widget":
        return Widget()

    def maybeWidget(self) -> Optional["Widget"]:
        return None

    def either(self) -> int | None:
        return None

    def ghost(self) -> "Missing":  # noqa: F821
        raise NotImplementedError

    def _touch(self):
        pass

    def __rebuild(self):
        pass


class Derived(Base):
    def describe(self) -> str:
        return "derived"

    def extra(self) -> Self:
        return self


class Widget:
    def build(self) -> "Widget":
        return self

    def attach(self, owner: "Base", spare: "Missing") -> "Widget":  # noqa: F821
        return self


class Toolbox:
    @staticmethod
    def f() -> Widget:
        return Widget()

    @staticmethod
    def __g() -> Widget:
        return Widget()

    def h(self) -> None:
        pass


class Shape(abc.ABC):
    @abc.abstractmethod
    def area(self) -> float: ...

    def describe(self) -> str:
        return "shape"


class Square(Shape):
    def area(self) -> float:
        return 1.0


class LoggingMixin:
    def log(self, msg: str) -> None:
        pass


@final
class Sealed:
    @final
    def seal(self) -> None:
        pass


class Handle:
    def __del__(self):
        pass


class Outer:
    class Inner:
        pass


# Fields


class Settings:
    DEFAULT: ClassVar[int] = 3
    LIMIT: Final = 10
    version = "1"
    name: str
    _cache: dict
    __secret: str

    def __init__(self):
        self._size = 0

    @property
    def title(self) -> str:
        return self.name

    @property
    def size(self) -> int:
        return self._size

    @size.setter
    def size(self, value: int):
        self._size = value


@dataclasses.dataclass(frozen=True)
class Point:
    x: int
    y: int = 0


# Attributes


class Mailer:
    @attribute(Service, "mailer", scope="request")
    @attribute(PrimaryService, "main")
    def send(self, to: Annotated[str, Inject("recipient")], body: str = "") -> bool:
        return True

    @attribute(Faulty)
    def boom(self) -> None:
        pass

    @staticmethod
    @attribute(Service, "static")
    def create() -> "Mailer":
        return Mailer()


class SubMailer(Mailer):
    def send(self, to: str, body: str = "") -> bool:
        return False


# Free functions


def build_widget(size: int, owner: Base, *extras, **options) -> Widget:
    return Widget()


def selfish(x: Self) -> None:
    pass
