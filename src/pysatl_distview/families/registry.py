"""
Dispatch table from a :class:`~pysatl_distview.types.FamilyName` to the family
object that evaluates it.

There is exactly one register per process. It is filled once by
:func:`~pysatl_distview.families.configuration.configure_families_register`
and only read afterwards.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import ClassVar

    from pysatl_distview.families.parametric_family import ParametricFamily


class ParametricFamilyRegister:
    """
    Process-wide register of parametric families, keyed by family name.

    Instantiating the class always yields the same object; the classmethods
    operate on that object, so callers rarely need an instance at all.
    """

    _instance: ClassVar[ParametricFamilyRegister | None] = None
    _families: dict[str, ParametricFamily]

    def __new__(cls) -> ParametricFamilyRegister:
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._families = {}
            cls._instance = instance
        return cls._instance

    def __len__(self) -> int:
        return len(self._families)

    def __iter__(self) -> Iterator[ParametricFamily]:
        return iter(list(self._families.values()))

    @classmethod
    def get(cls, name: str) -> ParametricFamily:
        """
        Family registered under ``name``.

        Raises
        ------
        ValueError
            If nothing is registered under ``name``.
        """
        family = cls()._families.get(name)
        if family is None:
            raise ValueError(f"No family {name} found in register")
        return family

    @classmethod
    def contains(cls, name: str) -> bool:
        return name in cls()._families

    @classmethod
    def register(cls, family: ParametricFamily) -> None:
        """
        Add a family under its own name.

        Raises
        ------
        ValueError
            If the name is taken.
        """
        families = cls()._families
        if family.name in families:
            raise ValueError(f"Family {family.name} already found in register")
        families[family.name] = family

    @classmethod
    def names(cls) -> Iterator[str]:
        """Registered names in registration order."""
        return iter(list(cls()._families))

    @classmethod
    def _reset(cls) -> None:
        cls._instance = None
