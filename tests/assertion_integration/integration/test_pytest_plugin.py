"""pytest plugin integration tests."""

from __future__ import annotations

import pytest

_PLUGIN_ARGS = (
    "-p",
    "no:sdk_response_matcher",
    "-p",
    "sdk_response_matcher.assertion_integration.pytest_plugin",
)


def test_fixtures_validate_sdk_responses(pytester: pytest.Pytester) -> None:
    pytester.makepyfile(
        """
        def test_estimate_fee(schema_matcher):
            schema_matcher.assert_matches({"overall_fee": "123456"}, "EstimateFee")

        def test_equality_helper(schema_matcher):
            deployment = {"contract_address": ["0x1a"], "transaction_hash": "0x2b"}
            assert deployment == schema_matcher.ref("MultiDeployContractResponse")

        def test_registry_is_shared(schema_registry, schema_matcher):
            assert schema_matcher.registry is schema_registry
            assert "GetTransactionReceiptResponse" in schema_registry
        """
    )

    result = pytester.runpytest(*_PLUGIN_ARGS)

    result.assert_outcomes(passed=3)


def test_failed_equality_shows_path_qualified_mismatches(pytester: pytest.Pytester) -> None:
    pytester.makepyfile(
        """
        def test_bad_fee(schema_matcher):
            assert {"overall_fee": "abc"} == schema_matcher.ref("EstimateFee")
        """
    )

    result = pytester.runpytest(*_PLUGIN_ARGS)

    result.assert_outcomes(failed=1)
    result.stdout.fnmatch_lines(
        [
            "*value does not match schema 'EstimateFee':*",
            '*overall_fee: expected numeric-string, got "abc"*',
        ]
    )


def test_schema_file_option_and_ini_register_extra_schemas(pytester: pytest.Pytester) -> None:
    pytester.makefile(".yaml", ini_schemas="schemas:\n  StarkName: string\n")
    option_file = pytester.makefile(".yaml", option_schemas="schemas:\n  ClassHash: hex-string\n")
    pytester.makeini(
        """
        [pytest]
        schema_files = ini_schemas.yaml
        """
    )
    pytester.makepyfile(
        """
        def test_custom(schema_matcher):
            schema_matcher.assert_matches("ben.stark", "StarkName")
            schema_matcher.assert_matches("0x1", "ClassHash")
        """
    )

    result = pytester.runpytest(*_PLUGIN_ARGS, "--schema-file", str(option_file))

    result.assert_outcomes(passed=1)
    result.stdout.fnmatch_lines(["schema files: *ini_schemas.yaml*option_schemas.yaml*"])


def test_unknown_schema_name_errors_the_test(pytester: pytest.Pytester) -> None:
    pytester.makepyfile(
        """
        def test_typo(schema_matcher):
            schema_matcher.assert_matches({}, "EstimateFees")
        """
    )

    result = pytester.runpytest(*_PLUGIN_ARGS)

    result.assert_outcomes(failed=1)
    result.stdout.fnmatch_lines(["*UnknownSchemaError*"])
