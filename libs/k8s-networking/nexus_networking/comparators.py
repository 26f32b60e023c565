"""Drift detection between deployed and requested networking resources."""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from .models import ExposeType, NamespacedName, NetworkObject

logger = logging.getLogger(__name__)

# Status, resourceVersion, generation and annotations are never compared
COMPARED_FIELDS = ("name", "namespace", "spec")

# Spec keys the server fills in when the request leaves them out
ROUTE_GENERATED_SPEC_KEYS = ("host",)


@dataclass
class FieldMismatch:
    """A compared field whose values differ."""

    field: str
    deployed: Any
    requested: Any


@dataclass
class ComparisonResult:
    """Outcome of comparing a deployed object against a requested one."""

    kind: ExposeType
    deployed_key: NamespacedName
    requested_key: NamespacedName
    mismatches: list[FieldMismatch] = field(default_factory=list)

    @property
    def equal(self) -> bool:
        return not self.mismatches


DiagnosticSink = Callable[[ComparisonResult], None]


def log_mismatch(result: ComparisonResult) -> None:
    """Default sink: log unequal resources."""
    fields = ", ".join(m.field for m in result.mismatches)
    logger.info(
        f"Resources are not equal: {result.kind.value} deployed={result.deployed_key} "
        f"requested={result.requested_key} fields=[{fields}]"
    )


class EqualityComparator:
    """
    Field-scoped equality for one networking kind.

    Only whitelisted fields are compared, using deep structural equality.
    Spec keys listed in generated_spec_keys are skipped when the requested
    spec does not set them. Unequal results are handed to the sink, if any.
    """

    def __init__(
        self,
        kind: ExposeType,
        fields: tuple[str, ...] = COMPARED_FIELDS,
        sink: Optional[DiagnosticSink] = None,
        generated_spec_keys: tuple[str, ...] = (),
    ):
        self.kind = kind
        self.fields = fields
        self.sink = sink
        self.generated_spec_keys = generated_spec_keys

    def compare(
        self, deployed: NetworkObject, requested: NetworkObject
    ) -> ComparisonResult:
        """
        Compare the whitelisted fields of two objects.

        Args:
            deployed: Object read from the cluster
            requested: Object computed from the owner

        Returns:
            ComparisonResult listing every mismatching field

        Raises:
            TypeError: If either object is not of this comparator's kind
        """
        for obj in (deployed, requested):
            if obj.kind != self.kind:
                raise TypeError(
                    f"{self.kind.value} comparator cannot compare a {obj.kind.value}"
                )

        result = ComparisonResult(
            kind=self.kind,
            deployed_key=deployed.key,
            requested_key=requested.key,
        )
        for name in self.fields:
            deployed_value = getattr(deployed, name)
            requested_value = getattr(requested, name)
            if name == "spec":
                deployed_value = self._without_generated(deployed_value, requested_value)
            if deployed_value != requested_value:
                result.mismatches.append(
                    FieldMismatch(name, deployed_value, requested_value)
                )
        return result

    def __call__(self, deployed: NetworkObject, requested: NetworkObject) -> bool:
        result = self.compare(deployed, requested)
        if not result.equal and self.sink is not None:
            self.sink(result)
        return result.equal

    def _without_generated(
        self, deployed_spec: dict[str, Any], requested_spec: dict[str, Any]
    ) -> dict[str, Any]:
        return {
            key: value
            for key, value in deployed_spec.items()
            if key not in self.generated_spec_keys or key in requested_spec
        }


route_equal = EqualityComparator(
    ExposeType.ROUTE, sink=log_mismatch, generated_spec_keys=ROUTE_GENERATED_SPEC_KEYS
)
ingress_equal = EqualityComparator(ExposeType.INGRESS, sink=log_mismatch)

COMPARATORS: dict[ExposeType, EqualityComparator] = {
    ExposeType.ROUTE: route_equal,
    ExposeType.INGRESS: ingress_equal,
}


def comparators_for(sink: Optional[DiagnosticSink] = None) -> dict[ExposeType, EqualityComparator]:
    """Build the comparator table with a caller-supplied sink."""
    if sink is None:
        return dict(COMPARATORS)
    return {
        ExposeType.ROUTE: EqualityComparator(
            ExposeType.ROUTE, sink=sink, generated_spec_keys=ROUTE_GENERATED_SPEC_KEYS
        ),
        ExposeType.INGRESS: EqualityComparator(ExposeType.INGRESS, sink=sink),
    }
