"""Built-in schema catalog tests."""

from __future__ import annotations

import pytest
from sdk_response_matcher.schema_management.builtin_catalog import (
    REQUIRED_BUILTIN_SCHEMAS,
    builtin_schemas,
)
from sdk_response_matcher.schema_management.schema_models import (
    ArrayOf,
    ObjectShape,
    OneOf,
    Primitive,
    PrimitiveKind,
    Ref,
)


def test_required_response_schemas_are_packaged() -> None:
    schemas = builtin_schemas()

    for name in REQUIRED_BUILTIN_SCHEMAS:
        assert schemas.get(name) is not None, name


def test_estimate_fee_requires_numeric_string_overall_fee() -> None:
    estimate_fee = builtin_schemas()["EstimateFee"]

    assert isinstance(estimate_fee, ObjectShape)
    overall_fee = estimate_fee.fields["overall_fee"]
    assert overall_fee.required is True
    assert overall_fee.definition == Primitive(PrimitiveKind.NUMERIC_STRING)


def test_multi_deploy_declares_address_array_and_transaction_hash() -> None:
    multi_deploy = builtin_schemas()["MultiDeployContractResponse"]

    assert isinstance(multi_deploy, ObjectShape)
    assert multi_deploy.fields["contract_address"].definition == ArrayOf(
        Primitive(PrimitiveKind.HEX_STRING)
    )
    assert multi_deploy.fields["transaction_hash"].definition == Primitive(
        PrimitiveKind.HEX_STRING
    )


def test_receipt_schema_is_polymorphic() -> None:
    receipt = builtin_schemas()["GetTransactionReceiptResponse"]

    assert isinstance(receipt, OneOf)
    assert Ref("PendingTransactionReceiptResponse") in receipt.alternatives


def test_every_reference_points_to_a_packaged_schema() -> None:
    schemas = builtin_schemas()

    def collect_refs(node) -> set[str]:
        if isinstance(node, Ref):
            return {node.name}
        if isinstance(node, ArrayOf):
            return collect_refs(node.element)
        if isinstance(node, OneOf):
            return set().union(*(collect_refs(item) for item in node.alternatives))
        if isinstance(node, ObjectShape):
            return set().union(
                set(), *(collect_refs(spec.definition) for spec in node.fields.values())
            )
        return set()

    referenced = set().union(*(collect_refs(node) for node in schemas.values()))

    assert referenced <= set(schemas)


def test_catalog_is_parsed_once_and_read_only() -> None:
    first = builtin_schemas()

    assert builtin_schemas() is first
    with pytest.raises(TypeError):
        first["EstimateFee"] = Primitive(PrimitiveKind.STRING)  # type: ignore[index]
