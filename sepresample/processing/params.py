# -*- coding: utf-8 -*-
"""
Tunable Parameter Annotations - Declarative processor configuration via typing.Annotated.

Constraint markers (``Range``, ``Options``, ``Desc``) are placed inside
``typing.Annotated`` class-body annotations on ``ImageProcessor``
subclasses. ``collect_param_specs`` turns them into ``ParamSpec``
objects, which validate values at construction time and again when a
call overrides them through ``**kwargs``.

Usage
-----
::

    from typing import Annotated
    from sepresample.processing.params import Range, Options, Desc

    class MyResize(ImageTransform):
        width: Annotated[int, Range(min=0), Desc('Target width')] = 64
        kernel: Annotated[str, Options('box', 'lanczos3'), Desc('Kernel')] = 'box'

License
-------
MIT License
Copyright (c) 2026 sepresample developers
See LICENSE file for full text.

Created
-------
2026-10-18

Modified
--------
2026-10-18
"""

# Standard library
import inspect
from typing import (
    Annotated,
    Any,
    Callable,
    Optional,
    Tuple,
    Union,
    get_origin,
    get_type_hints,
)

Number = Union[int, float]


class ParamMeta:
    """Base marker; any ``Annotated`` field carrying one is a tunable parameter."""


class Range(ParamMeta):
    """Inclusive numeric range constraint.

    Parameters
    ----------
    min : int or float, optional
        Smallest allowed value.
    max : int or float, optional
        Largest allowed value.
    """

    __slots__ = ('min', 'max')

    def __init__(self, min: Optional[Number] = None,
                 max: Optional[Number] = None) -> None:
        self.min = min
        self.max = max

    def __repr__(self) -> str:
        parts = []
        if self.min is not None:
            parts.append(f"min={self.min!r}")
        if self.max is not None:
            parts.append(f"max={self.max!r}")
        return f"Range({', '.join(parts)})"


class Options(ParamMeta):
    """Discrete choice constraint.

    Parameters
    ----------
    *choices
        Allowed values; at least one.
    """

    __slots__ = ('choices',)

    def __init__(self, *choices: Any) -> None:
        if not choices:
            raise ValueError("Options requires at least one choice")
        self.choices = choices

    def __repr__(self) -> str:
        return f"Options{self.choices!r}"


class Desc(ParamMeta):
    """Human-readable parameter description."""

    __slots__ = ('text',)

    def __init__(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return f"Desc({self.text!r})"


_MISSING = object()


class ParamSpec:
    """Resolved specification of one tunable parameter.

    Attributes
    ----------
    name : str
        Keyword-argument name.
    param_type : type
        Expected type. ``int`` is accepted where ``float`` is expected;
        ``bool`` is never accepted as a number.
    default : Any
        Default value (``None`` when required).
    description : str
        Text from ``Desc``.
    min_value, max_value : int, float or None
        Inclusive bounds from ``Range``.
    choices : tuple or None
        Allowed values from ``Options``.
    """

    __slots__ = ('name', 'param_type', 'default', 'has_default',
                 'description', 'min_value', 'max_value', 'choices')

    def __init__(
        self,
        name: str,
        param_type: type,
        default: Any = None,
        has_default: bool = True,
        description: str = '',
        min_value: Optional[Number] = None,
        max_value: Optional[Number] = None,
        choices: Optional[Tuple] = None,
    ) -> None:
        self.name = name
        self.param_type = param_type
        self.default = default
        self.has_default = has_default
        self.description = description
        self.min_value = min_value
        self.max_value = max_value
        self.choices = choices

    @property
    def required(self) -> bool:
        return not self.has_default

    def validate(self, value: Any) -> None:
        """Check ``value`` against type, range and choices.

        Raises
        ------
        TypeError
            Wrong type.
        ValueError
            Out of range or not an allowed choice.
        """
        expected = self.param_type
        if expected in (int, float):
            numeric = (int, float) if expected is float else (int,)
            if isinstance(value, bool) or not isinstance(value, numeric):
                raise TypeError(
                    f"Parameter '{self.name}' must be {expected.__name__}, "
                    f"got {type(value).__name__}"
                )
        elif expected is not object and not isinstance(value, expected):
            raise TypeError(
                f"Parameter '{self.name}' must be {expected.__name__}, "
                f"got {type(value).__name__}"
            )

        if self.min_value is not None and value < self.min_value:
            raise ValueError(
                f"Parameter '{self.name}' value {value!r} "
                f"is below minimum {self.min_value!r}"
            )
        if self.max_value is not None and value > self.max_value:
            raise ValueError(
                f"Parameter '{self.name}' value {value!r} "
                f"is above maximum {self.max_value!r}"
            )
        if self.choices is not None and value not in self.choices:
            raise ValueError(
                f"Parameter '{self.name}' value {value!r} "
                f"is not in allowed choices {self.choices!r}"
            )

    def __repr__(self) -> str:
        text = (f"ParamSpec(name={self.name!r}, "
                f"param_type={self.param_type.__name__}")
        if self.has_default:
            text += f", default={self.default!r}"
        if self.min_value is not None:
            text += f", min_value={self.min_value!r}"
        if self.max_value is not None:
            text += f", max_value={self.max_value!r}"
        if self.choices is not None:
            text += f", choices={self.choices!r}"
        return text + ")"


def collect_param_specs(cls: type) -> Tuple[ParamSpec, ...]:
    """Collect ``ParamSpec`` objects from ``Annotated`` fields of ``cls``.

    Fields are ordered parent-first, in declaration order within each
    class.

    Raises
    ------
    TypeError
        If a field declares both ``Range`` and ``Options``.
    """
    hints = get_type_hints(cls, include_extras=True)

    ordered = []
    for klass in reversed(cls.__mro__):
        for name in inspect.get_annotations(klass):
            if name in hints and name not in ordered:
                ordered.append(name)

    specs = []
    for name in ordered:
        hint = hints[name]
        if get_origin(hint) is not Annotated:
            continue
        metas = [m for m in hint.__metadata__ if isinstance(m, ParamMeta)]
        if not metas:
            continue
        rng = next((m for m in metas if isinstance(m, Range)), None)
        opts = next((m for m in metas if isinstance(m, Options)), None)
        desc = next((m for m in metas if isinstance(m, Desc)), None)
        if rng is not None and opts is not None:
            raise TypeError(
                f"Parameter '{name}' on {cls.__qualname__}: "
                f"Range and Options are mutually exclusive"
            )
        default = getattr(cls, name, _MISSING)
        specs.append(ParamSpec(
            name=name,
            param_type=hint.__args__[0],
            default=None if default is _MISSING else default,
            has_default=default is not _MISSING,
            description=desc.text if desc else '',
            min_value=rng.min if rng else None,
            max_value=rng.max if rng else None,
            choices=opts.choices if opts else None,
        ))
    return tuple(specs)


def make_init(specs: Tuple[ParamSpec, ...]) -> Callable[..., None]:
    """Build a keyword-only ``__init__`` that validates and stores ``specs``.

    The generated initializer calls ``self.__post_init__()`` when the
    class defines one.
    """
    def __init__(self, **kwargs: Any) -> None:
        unexpected = set(kwargs) - {s.name for s in specs}
        if unexpected:
            raise TypeError(
                f"{type(self).__name__}() got unexpected keyword "
                f"arguments: {', '.join(sorted(unexpected))}"
            )
        for spec in specs:
            if spec.name in kwargs:
                value = kwargs[spec.name]
            elif spec.has_default:
                value = spec.default
            else:
                raise TypeError(
                    f"{type(self).__name__}() missing required keyword "
                    f"argument: '{spec.name}'"
                )
            spec.validate(value)
            setattr(self, spec.name, value)
        if hasattr(self, '__post_init__'):
            self.__post_init__()

    params = [inspect.Parameter('self', inspect.Parameter.POSITIONAL_OR_KEYWORD)]
    for spec in specs:
        params.append(inspect.Parameter(
            spec.name, inspect.Parameter.KEYWORD_ONLY,
            default=spec.default if spec.has_default else inspect.Parameter.empty,
        ))
    __init__.__signature__ = inspect.Signature(params)
    return __init__
