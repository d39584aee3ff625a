from __future__ import annotations
from typing import Any, ClassVar, Iterator, Tuple, Union

from .format_type import BYTE_MAX, ColorSpace, format_classes

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # no instance dict → immutability

    space:          ClassVar[ColorSpace]
    channel_names:  ClassVar[Tuple[str, ...]]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *values: Scalar) -> None:
        # concrete classes fix their arity; this covers subclasses that pass values through
        if len(values) != len(self.channel_names):
            raise ValueError(
                f"{self.__class__.__name__} expects {len(self.channel_names)} channels, got {len(values)}"
            )
        # type enforcement only, ranges are the caller's business
        cast_to = format_classes[self.space]
        self._value = tuple(cast_to(v) for v in values)

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ScalarVector:
        return self._value

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._value)

    def __len__(self) -> int:
        return len(self._value)

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{n}={v!r}" for n, v in zip(self.channel_names, self._value))
        return f"{self.__class__.__name__}({fields})"

    def __reduce__(self):
        return (self.__class__, self._value)

    def replace(self, **channels: Scalar) -> ColorBase:
        """Return a copy with the given channels changed."""
        unknown = set(channels) - set(self.channel_names)
        if unknown:
            raise ValueError(f"{self.__class__.__name__} has no channel(s) {sorted(unknown)}")
        values = tuple(channels.get(n, v) for n, v in zip(self.channel_names, self._value))
        return self.__class__(*values)


class Rgb(ColorBase):
    """8-bit RGB color with an alpha channel, opaque unless told otherwise."""
    __slots__ = ()
    space:          ClassVar[ColorSpace] = ColorSpace.RGB
    channel_names:  ClassVar[Tuple[str, ...]] = ('r', 'g', 'b', 'a')

    def __init__(self, r: int, g: int, b: int, a: int = BYTE_MAX) -> None:
        super().__init__(r, g, b, a)

    @property
    def r(self) -> int:
        return self._value[0]

    @property
    def g(self) -> int:
        return self._value[1]

    @property
    def b(self) -> int:
        return self._value[2]

    @property
    def a(self) -> int:
        return self._value[3]

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self._value[:3]


class _HsvBase(ColorBase):
    __slots__ = ()
    channel_names:  ClassVar[Tuple[str, ...]] = ('h', 's', 'v')

    def __init__(self, h: float, s: float, v: float) -> None:
        super().__init__(h, s, v)

    @property
    def h(self) -> float:
        return self._value[0]

    @property
    def s(self) -> float:
        return self._value[1]

    @property
    def v(self) -> float:
        return self._value[2]


class StandardHsv(_HsvBase):
    """Hue in degrees, saturation and value in [0, 1]."""
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.STANDARD_HSV


class SeHsv(_HsvBase):
    """Hue in degrees, saturation and value on the in-game [-100, 100] picker scale."""
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.SE_HSV


class BlueprintHsv(_HsvBase):
    """All three channels normalized to [0, 1] as stored in blueprint files."""
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.BLUEPRINT_HSV


AnyColor = Union[Rgb, StandardHsv, SeHsv, BlueprintHsv]

space_to_class: dict[ColorSpace, type[ColorBase]] = {
    cls.space: cls for cls in (Rgb, StandardHsv, SeHsv, BlueprintHsv)
}
