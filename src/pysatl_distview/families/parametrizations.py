"""
Parameter sets of distribution families.

A parametrization is a frozen dataclass registered with a family under a name.
Its ``@constraint`` methods define the valid domain, it knows how to convert
itself to the family's base parametrization, and it is changed one field at a
time through :meth:`Parametrization.with_parameter`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, fields, is_dataclass, replace
from inspect import isfunction
from typing import TYPE_CHECKING

from pysatl_distview.errors import ParameterDomainError
from pysatl_distview.types import ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from pysatl_distview.families.parametric_family import ParametricFamily

_IS_CONSTRAINT = "__is_constraint"
_DESCRIPTION = "__constraint_description"


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    A named predicate over a parameter set.

    Parameters
    ----------
    description : str
        Text shown when the predicate fails, e.g. ``"sigma > 0"``.
    check : Callable[[Any], bool]
        Predicate called with the parameter set.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Base class of parameter sets.

    Subclasses are turned into frozen slotted dataclasses by
    :func:`parametrization`, so a parameter set never changes after it is
    built.
    """

    # Set by @parametrization
    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]
    _constraints: ClassVar[tuple[ParametrizationConstraint, ...]] = ()

    @property
    def name(self) -> str:
        return type(self).__param_name__

    @property
    def family_name(self) -> str:
        return type(self).__family__.name

    @property
    def parameters(self) -> dict[str, Any]:
        """Field values in declaration order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]

    @property
    def constraints(self) -> tuple[ParametrizationConstraint, ...]:
        return self._constraints

    def validate(self) -> None:
        """
        Check every constraint, in declaration order.

        Raises
        ------
        ParameterDomainError
            On the first constraint that does not hold.
        """
        failed = next((c for c in self._constraints if not c.check(self)), None)
        if failed is not None:
            raise ParameterDomainError(f'Constraint "{failed.description}" does not hold')

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Equivalent parameters in the family's base parametrization.

        The base parametrization itself keeps this default, which returns
        ``self``; every alternative parametrization overrides it.
        """
        return self

    def repair(self, changed: str) -> Parametrization:
        """
        Restore constraints broken by a change of the field ``changed``.

        The default does nothing, so an invalid value is rejected by
        :meth:`validate`. Families that clamp instead of rejecting override it.
        """
        return self

    def with_parameter(self, name: str, value: Any) -> Parametrization:
        """
        Copy with one field replaced, repaired and validated.

        Parameters
        ----------
        name : str
            Field to change.
        value : Any
            Its new value.

        Raises
        ------
        KeyError
            If there is no field ``name``.
        ParameterDomainError
            If the copy is still invalid after :meth:`repair`.
        """
        if name not in self.parameters:
            raise KeyError(f"Parametrization '{self.name}' has no parameter '{name}'")

        updated = replace(self, **{name: value}).repair(name)  # type: ignore[type-var]
        updated.validate()
        return updated


def constraint[F: Callable[..., bool]](description: str) -> Callable[[F], F]:
    """
    Mark an instance method of a parametrization as a constraint.

    Parameters
    ----------
    description : str
        Text of the error raised when the method returns ``False``.
    """

    def mark(func: F) -> F:
        setattr(func, _IS_CONSTRAINT, True)
        setattr(func, _DESCRIPTION, description)
        return func

    return mark


def _collect_constraints(cls: type) -> tuple[ParametrizationConstraint, ...]:
    collected = []
    for attr_name, attr in vars(cls).items():
        if isinstance(attr, staticmethod | classmethod):
            if getattr(attr.__func__, _IS_CONSTRAINT, False):
                raise TypeError(f"@constraint '{attr_name}' must be an instance method")
        elif isfunction(attr) and getattr(attr, _IS_CONSTRAINT, False):
            description = getattr(attr, _DESCRIPTION, attr.__name__)
            collected.append(ParametrizationConstraint(description=description, check=attr))
    return tuple(collected)


def parametrization(
    *,
    family: ParametricFamily,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Class decorator registering a parametrization with ``family``.

    The class becomes a frozen slotted dataclass (unless it already is a
    dataclass), learns its family and name, and has its ``@constraint``
    methods collected.

    Raises
    ------
    TypeError
        If a constraint is a static or class method.
    ValueError
        If ``family`` does not declare ``name`` or already registered it.
    """

    def register(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)

        family.register_parametrization(name, cls)
        return cls

    return register
