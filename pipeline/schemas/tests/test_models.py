"""Tests for the protocol and court Pydantic schemas."""

from __future__ import annotations

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from models.protocolo import (
    ActivityEntry,
    GuiaSchema,
    ProtocolCreateSchema,
    ProtocolForm,
    ProtocolSchema,
)
from models.tribunal import TribunalInfo

NOW = datetime(2025, 3, 10, 12, 0, tzinfo=timezone.utc)


class TestTribunalInfo:
    def test_camel_case_dump(self):
        info = TribunalInfo(name="Tribunal Superior do Trabalho", system="PJe", process_type="trabalhista")

        assert info.model_dump(by_alias=True) == {
            "name": "Tribunal Superior do Trabalho",
            "system": "PJe",
            "processType": "trabalhista",
        }

    def test_accepts_alias_on_input(self):
        info = TribunalInfo.model_validate({"name": "X", "system": "PJe", "processType": "civel"})

        assert info.process_type == "civel"

    def test_frozen(self):
        info = TribunalInfo(name="X", system="PJe", process_type="civel")
        with pytest.raises(ValidationError):
            info.system = "ESAJ"

    def test_invalid_process_type(self):
        with pytest.raises(ValidationError):
            TribunalInfo(name="X", system="PJe", process_type="penal")

    def test_hashable_and_comparable(self):
        a = TribunalInfo(name="X", system="PJe", process_type="civel")
        b = TribunalInfo(name="X", system="PJe", process_type="civel")

        assert a == b
        assert len({a, b}) == 1


class TestGuiaSchema:
    def test_esaj_format(self):
        guia = GuiaSchema(number="250590176268310-0001", system="ESAJ")
        assert guia.number == "250590176268310-0001"

    def test_tjrj_format(self):
        guia = GuiaSchema(number="12345678901-23", system="TJRJ Eletrônico")
        assert guia.system == "TJRJ Eletrônico"

    def test_wrong_format_for_system(self):
        with pytest.raises(ValidationError, match="invalid ESAJ guia number"):
            GuiaSchema(number="12345678901-23", system="ESAJ")

    def test_unsupported_system(self):
        with pytest.raises(ValidationError):
            GuiaSchema(number="250590176268310-0001", system="PJe")

    def test_whitespace_stripped(self):
        guia = GuiaSchema(number="  12345678901-23 ", system="TJRJ Eletrônico")
        assert guia.number == "12345678901-23"


class TestProtocolForm:
    def test_defaults_are_blank(self):
        form = ProtocolForm()

        assert form.process_number == ""
        assert form.jurisdiction == ""
        assert form.is_distribution is False
        assert form.observations == ""

    def test_camel_case_input(self):
        form = ProtocolForm.model_validate(
            {"processNumber": "0001234-56.2024.8.26.0100", "isDistribution": True, "processType": "civel"}
        )

        assert form.process_number == "0001234-56.2024.8.26.0100"
        assert form.is_distribution is True
        assert form.process_type == "civel"

    def test_invalid_jurisdiction(self):
        with pytest.raises(ValidationError):
            ProtocolForm(jurisdiction="3º Grau")

    def test_from_attributes(self):
        row = SimpleNamespace(
            process_number="1",
            court="",
            system="PJe",
            jurisdiction="2º Grau",
            process_type="",
            is_fatal=True,
            is_distribution=False,
            observations="",
        )

        form = ProtocolForm.model_validate(row)

        assert form.is_fatal is True
        assert form.jurisdiction == "2º Grau"


class TestProtocolSchema:
    def _protocol(self, **overrides) -> ProtocolSchema:
        fields = {"id": "p1", "created_at": NOW, "updated_at": NOW}
        fields.update(overrides)
        return ProtocolSchema(**fields)

    def test_defaults(self):
        p = self._protocol()

        assert p.status == "Aguardando"
        assert p.assigned_to is None
        assert p.guias == []
        assert p.activity_log == []

    @pytest.mark.parametrize(
        ("status", "pending"),
        [
            ("Aguardando", True),
            ("Em Execução", True),
            ("Peticionado", False),
            ("Devolvido", False),
            ("Cancelado", False),
        ],
    )
    def test_is_pending(self, status, pending):
        assert self._protocol(status=status).is_pending is pending

    def test_invalid_status(self):
        with pytest.raises(ValidationError):
            self._protocol(status="Arquivado")

    def test_camel_case_dump(self):
        entry = ActivityEntry(action="created", description="Protocolo criado", timestamp=NOW)
        p = self._protocol(activity_log=[entry], assigned_to="Carlos")

        data = p.model_dump(mode="json", by_alias=True)

        assert data["assignedTo"] == "Carlos"
        assert data["activityLog"][0]["performedBy"] is None
        assert "createdAt" in data
        assert "returnReason" in data

    def test_create_schema_guias(self):
        p = ProtocolCreateSchema(
            needs_guia=True,
            guias=[{"number": "250590176268310-0001", "system": "ESAJ"}],
        )
        assert isinstance(p.guias[0], GuiaSchema)


class TestActivityEntry:
    def test_frozen(self):
        entry = ActivityEntry(action="returned", description="Protocolo devolvido", timestamp=NOW)
        with pytest.raises(ValidationError):
            entry.details = "x"

    def test_invalid_action(self):
        with pytest.raises(ValidationError):
            ActivityEntry(action="deleted", description="x", timestamp=NOW)
