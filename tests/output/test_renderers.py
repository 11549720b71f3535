"""Tests for operation-specific Rich renderers."""

from __future__ import annotations

from thaiid.config.settings import ThaiIdSettings
from thaiid.output.renderers import render_quiet, render_result
from thaiid.services.fixtures import FixtureService
from thaiid.services.identity import IdentityService
from thaiid.services.result import ServiceResult


class TestGenerateRenderer:
    def test_seeded_table(self, settings: ThaiIdSettings) -> None:
        result = IdentityService(settings).generate(2, seed=42)
        output = render_result(result)
        assert "OK" in output
        assert "seeded" in output
        assert "1000000000424" in output
        assert "1-0000-00000-42-4" in output
        assert "Seed" in output
        assert "43" in output

    def test_random_table_has_no_seed_column(self, settings: ThaiIdSettings) -> None:
        result = IdentityService(settings).generate(1)
        output = render_result(result)
        assert "random" in output
        assert "Seed" not in output


class TestValidateRenderer:
    def test_success_summary(self, settings: ThaiIdSettings) -> None:
        result = IdentityService(settings).validate(["1000000000009"])
        output = render_result(result)
        assert "OK" in output
        assert "1/1" in output

    def test_verbose_lists_candidates(self, settings: ThaiIdSettings) -> None:
        result = IdentityService(settings).validate(["1000000000009"])
        output = render_result(result, verbose=True)
        assert "1000000000009" in output
        assert "valid" in output

    def test_failure_lists_statuses(self, settings: ThaiIdSettings) -> None:
        result = IdentityService(settings).validate(["1000000000008", "12"])
        output = render_result(result)
        assert "ERROR" in output
        assert "checksum_mismatch" in output
        assert "malformed" in output

    def test_failure_detail_when_verbose(self, settings: ThaiIdSettings) -> None:
        result = IdentityService(settings).validate(["12"])
        output = render_result(result, verbose=True)
        assert "detail:" in output
        assert "invalid:" in output


class TestChecksumRenderer:
    def test_fields(self, settings: ThaiIdSettings) -> None:
        output = render_result(IdentityService(settings).checksum("123456789012"))
        assert "body: 123456789012" in output
        assert "check_digit: 1" in output
        assert "id: 1234567890121" in output


class TestFixtureRenderer:
    def test_table(self, settings: ThaiIdSettings) -> None:
        output = render_result(FixtureService(settings).customers(1, seed=0))
        assert "idcard" in output
        assert "1000000000009" in output
        assert "กรุงเทพมหานคร" in output


class TestGenericRenderer:
    def test_unknown_op(self) -> None:
        output = render_result(ServiceResult(ok=True, op="mystery", data={"answer": 42}))
        assert "mystery" in output
        assert "answer: 42" in output

    def test_quiet_unknown_op(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="mystery")) == "OK: mystery"
