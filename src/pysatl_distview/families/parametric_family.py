"""
Parametric families of distributions.

A :class:`ParametricFamily` ties together what the viewer needs to know about
one distribution kind:

* its parametrizations (the first one is the base);
* characteristic functions ``f(parameters, x)``, each written for one or more
  parametrizations;
* support and sampling grid as functions of the base parameters;
* static display data: title, description, moment formula templates and the
  default parameter values.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from functools import partial
from typing import TYPE_CHECKING

from pysatl_distview.distributions.computation import AnalyticalComputation
from pysatl_distview.errors import ParameterDomainError
from pysatl_distview.families.distribution import ParametricFamilyDistribution

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence
    from typing import Any

    from pysatl_distview.distributions.grid import SamplingGrid
    from pysatl_distview.distributions.support import Support
    from pysatl_distview.families.parametrizations import Parametrization
    from pysatl_distview.types import (
        DistributionType,
        GenericCharacteristicName,
        ParametrizationName,
    )

    type ParametrizedFunction = Callable[[Parametrization, Any], Any]
    type CharacteristicForms = dict[ParametrizationName, ParametrizedFunction]
    type AnalyticalPlan = dict[
        ParametrizationName, dict[GenericCharacteristicName, ParametrizationName]
    ]


def _analytical_plan(
    names: Sequence[ParametrizationName],
    characteristics: Mapping[GenericCharacteristicName, CharacteristicForms],
) -> AnalyticalPlan:
    """
    For each parametrization, which form of each characteristic to call.

    A parametrization uses its own form when one is registered and the base
    form otherwise; characteristics with neither are left out.
    """
    base = names[0]
    plan: AnalyticalPlan = {}
    for name in names:
        plan[name] = {
            characteristic: name if name in forms else base
            for characteristic, forms in characteristics.items()
            if name in forms or base in forms
        }
    return plan


class ParametricFamily:
    """
    One distribution kind with its parametrizations and characteristics.

    Parameters
    ----------
    name : str
        Family name, normally a :class:`~pysatl_distview.types.FamilyName`.
    distr_type : DistributionType
        Type of every member of the family.
    distr_parametrizations : list[ParametrizationName]
        Declared parametrization names; the first is the base one.
    distr_characteristics : dict
        Characteristic name to either one function (written for the base
        parametrization) or a mapping from parametrization name to function.
    grid_by_parametrization : Callable[[Parametrization], SamplingGrid], optional
        Plotting grid as a function of the base parameters.
    support_by_parametrization : Callable[[Parametrization], Support | None], optional
        Support as a function of the base parameters.
    title, description : str, optional
        Display texts; the title defaults to ``name``.
    expectation_tex, variance_tex : str, optional
        ``str.format`` templates of the moment formulas. The fields of the
        base parameters, ``expectation`` and ``variance`` are available.
    default_parameters : Mapping[str, Any], optional
        Base parameter values shown before the user changes anything.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType,
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: Mapping[
            GenericCharacteristicName, CharacteristicForms | ParametrizedFunction
        ],
        grid_by_parametrization: Callable[[Parametrization], SamplingGrid] | None = None,
        support_by_parametrization: Callable[[Parametrization], Support | None] | None = None,
        title: str = "",
        description: str = "",
        expectation_tex: str = "",
        variance_tex: str = "",
        default_parameters: Mapping[str, Any] | None = None,
    ):
        if not distr_parametrizations:
            raise ValueError(f"Family {name} declares no parametrization.")

        self._name = name
        self._type = distr_type
        self._grid = grid_by_parametrization
        self._support = support_by_parametrization

        self.title = title or name
        self.description = description
        self.expectation_tex = expectation_tex
        self.variance_tex = variance_tex
        self.default_parameters: dict[str, Any] = dict(default_parameters or {})

        self.parametrization_names: list[ParametrizationName] = list(distr_parametrizations)
        self.base_parametrization_name: ParametrizationName = distr_parametrizations[0]
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        self.distr_characteristics: dict[GenericCharacteristicName, CharacteristicForms] = {
            characteristic: forms
            if isinstance(forms, dict)
            else {self.base_parametrization_name: forms}
            for characteristic, forms in distr_characteristics.items()
        }
        self._analytical_plan = _analytical_plan(
            self.parametrization_names, self.distr_characteristics
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Registered parametrization classes by name."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Class of the base parametrization.

        Raises
        ------
        ValueError
            If it has not been registered yet.
        """
        base = self._parametrizations.get(self.base_parametrization_name)
        if base is None:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            )
        return base

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Attach a parametrization class; used by the ``@parametrization`` decorator.

        Raises
        ------
        ValueError
            If ``name`` is not declared by the family or is already taken.
        """
        if name not in self.parametrization_names:
            raise ValueError(f"Parametrization '{name}' is not declared by family {self.name}.")
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        """Registered class called ``name``; raises ``KeyError`` if there is none."""
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def support_for(self, parameters: Parametrization) -> Support | None:
        if self._support is None:
            return None
        return self._support(self.to_base(parameters))

    def grid_for(self, parameters: Parametrization) -> SamplingGrid:
        """
        Plotting grid for the given parameters.

        Raises
        ------
        RuntimeError
            If the family has no grid function.
        """
        if self._grid is None:
            raise RuntimeError(f"Family {self.name} declares no sampling grid.")
        return self._grid(self.to_base(parameters))

    def _build_analytical_computations(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Bind each planned characteristic to the parameters its form expects."""
        base_parameters: Parametrization | None = None
        computations: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] = {}

        for characteristic, provider in self._analytical_plan.get(parameters.name, {}).items():
            if provider == parameters.name:
                bound = parameters
            else:
                if base_parameters is None:
                    base_parameters = self.to_base(parameters)
                bound = base_parameters

            func = self.distr_characteristics[characteristic][provider]
            computations[characteristic] = AnalyticalComputation(
                target=characteristic, func=partial(func, bound)
            )
        return computations

    def from_parameters(self, parameters: Parametrization) -> ParametricFamilyDistribution:
        """
        Distribution described by an existing parameter set.

        Raises
        ------
        ParameterDomainError
            If the parameters belong to another family or violate a constraint,
            either as given or after conversion to the base parametrization.
        """
        registered = self._parametrizations.get(parameters.name)
        if registered is None or not isinstance(parameters, registered):
            raise ParameterDomainError(
                f"Parameters {type(parameters).__name__} do not belong to family {self.name}"
            )

        parameters.validate()
        self.to_base(parameters).validate()
        return ParametricFamilyDistribution(
            self.name,
            self._type,
            parameters,
            self.support_for(parameters),
        )

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Distribution with the given parameter values.

        Parameters
        ----------
        parametrization_name : str, optional
            Parametrization the values are given in; the base one by default.
        **parameters_values
            Field values of that parametrization.

        Raises
        ------
        KeyError
            If the parametrization name is not registered.
        ParameterDomainError
            If the values violate a constraint.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self.get_parametrization(parametrization_name)
        return self.from_parameters(parametrization_class(**parameters_values))

    def default_distribution(self) -> ParametricFamilyDistribution:
        return self.distribution(**self.default_parameters)

    __call__ = distribution
