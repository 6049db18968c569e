"""Tests for the protocol lifecycle helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from models.protocolo import ProtocolCreateSchema, ProtocolForm

from triagem import config
from triagem.lifecycle import (
    LifecycleError,
    ROBOT_PERFORMER,
    autofill,
    cancel,
    describe_change,
    move_to_queue,
    new_protocol,
    resubmit,
    return_protocol,
    set_status,
)

T0 = datetime(2025, 3, 10, 12, 0, tzinfo=timezone.utc)
T1 = T0 + timedelta(minutes=5)
T2 = T0 + timedelta(minutes=10)
T3 = T0 + timedelta(minutes=15)


@pytest.fixture(autouse=True)
def _fallback_handler(monkeypatch):
    monkeypatch.setattr(config, "FALLBACK_HANDLER", "Carlos")


def _submission(**overrides) -> ProtocolCreateSchema:
    fields = {
        "process_number": "0001234-56.2024.8.26.0100",
        "jurisdiction": "1º Grau",
        "petition_type": "Manifestação",
        "task_code": "12345",
    }
    fields.update(overrides)
    return ProtocolCreateSchema(**fields)


class TestAutofill:
    def test_fills_court_fields(self):
        filled = autofill(_submission())

        assert filled.court == "Tribunal de Justiça de São Paulo"
        assert filled.system == "ESAJ"
        assert filled.process_type == "civel"

    def test_keeps_operator_values_when_unclassified(self):
        form = _submission(
            process_number="0001234-56.2024.8.25.0001",
            court="Tribunal de Justiça do Rio Grande do Norte",
            system="PJe",
        )

        assert autofill(form) == form


class TestNewProtocol:
    def test_robot_protocol(self):
        p = new_protocol(_submission(), performed_by="adv@firma.com.br", protocol_id="p1", now=T0)

        assert p.id == "p1"
        assert p.status == "Aguardando"
        assert p.assigned_to is None
        assert p.court == "Tribunal de Justiça de São Paulo"
        assert p.created_at == p.updated_at == T0
        assert len(p.activity_log) == 1
        entry = p.activity_log[0]
        assert entry.action == "created"
        assert entry.description == "Protocolo criado na fila do Robô"
        assert entry.performed_by == "adv@firma.com.br"

    def test_manual_protocol(self):
        p = new_protocol(_submission(process_number="5001234-56.2024.8.13.0024"), now=T0)

        assert p.system == "PJe"
        assert p.court == "Tribunal de Justiça de Minas Gerais"
        assert p.assigned_to == "Carlos"
        assert p.activity_log[0].description == "Protocolo criado e atribuído à fila Carlos"

    def test_distribution(self):
        p = new_protocol(_submission(process_number=""), is_distribution=True, now=T0)

        assert p.is_distribution is True
        assert p.assigned_to == "Carlos"

    def test_generates_id(self):
        assert new_protocol(_submission()).id != new_protocol(_submission()).id


class TestReturnAndResubmit:
    @pytest.fixture
    def protocol(self):
        return new_protocol(_submission(), protocol_id="p1", now=T0)

    def test_return_by_person(self, protocol):
        returned = return_protocol(protocol, "Falta procuração", performed_by="mod@firma", now=T1)

        assert returned.status == "Devolvido"
        assert returned.assigned_to is None
        assert returned.return_reason == "Falta procuração"
        assert returned.updated_at == T1
        assert returned.activity_log[-1].action == "returned"
        assert returned.activity_log[-1].details == "Falta procuração"
        # input untouched
        assert protocol.status == "Aguardando"
        assert len(protocol.activity_log) == 1

    def test_return_by_robot_goes_to_manual_queue(self, protocol):
        returned = return_protocol(protocol, "Sessão expirada", performed_by=ROBOT_PERFORMER, now=T1)

        assert returned.status == "Aguardando"
        assert returned.assigned_to == "Manual"
        assert returned.return_reason == "Devolvido pelo Robô: Sessão expirada"
        assert returned.activity_log[-1].description == "Protocolo devolvido pelo Robô para Fila Manual"

    def test_resubmit_never_goes_to_robot(self, protocol):
        returned = return_protocol(protocol, "Arquivo ilegível", now=T1)
        again = resubmit(returned, performed_by="adv@firma", now=T2)

        assert again.status == "Aguardando"
        assert again.assigned_to == "Carlos"
        assert again.return_reason is None
        assert again.activity_log[-1].action == "resubmitted"
        assert again.activity_log[-1].description == "Protocolo editado e reenviado"

    def test_resubmit_returns_to_previous_manual_queue(self, protocol):
        moved = move_to_queue(protocol, "Deyse", now=T1)
        returned = return_protocol(moved, "Guia vencida", now=T2)
        again = resubmit(returned, now=T3)

        assert again.assigned_to == "Deyse"

    def test_resubmit_applies_changes(self, protocol):
        returned = return_protocol(protocol, "Faltou observação", now=T1)
        again = resubmit(returned, ProtocolForm(observations="Juntar guia"), now=T2)

        assert again.observations == "Juntar guia"
        assert again.court == protocol.court

    def test_resubmit_requires_returned_status(self, protocol):
        with pytest.raises(LifecycleError):
            resubmit(protocol)


class TestStatusChanges:
    @pytest.fixture
    def protocol(self):
        return new_protocol(_submission(), protocol_id="p1", now=T0)

    def test_move_to_robot(self, protocol):
        manual = move_to_queue(protocol, "Iago", now=T1)
        back = move_to_queue(manual, None, performed_by="mod@firma", now=T2)

        assert manual.activity_log[-1].description == "Movido para: Fila do Iago"
        assert back.assigned_to is None
        assert back.activity_log[-1].description == "Movido para: Fila do Robô"

    def test_set_status_running(self, protocol):
        running = set_status(protocol, "Em Execução", now=T1)

        assert running.status == "Em Execução"
        assert running.activity_log[-1].description == "Protocolo em execução"

    def test_set_status_invalid_value(self, protocol):
        with pytest.raises(ValueError):
            set_status(protocol, "Arquivado", now=T1)

    def test_set_status_cannot_return(self, protocol):
        with pytest.raises(LifecycleError):
            set_status(protocol, "Devolvido")

    def test_set_status_cannot_reopen_returned(self, protocol):
        returned = return_protocol(protocol, "Falta guia", now=T1)

        with pytest.raises(LifecycleError):
            set_status(returned, "Aguardando", now=T2)
        with pytest.raises(LifecycleError):
            set_status(returned, "Em Execução", now=T2)

    def test_returned_can_still_be_cancelled(self, protocol):
        returned = return_protocol(protocol, "Falta guia", now=T1)

        assert set_status(returned, "Cancelado", now=T2).status == "Cancelado"

    def test_cancel_is_final(self, protocol):
        cancelled = cancel(protocol, now=T1)

        assert cancelled.status == "Cancelado"
        assert cancelled.activity_log[-1].description == "Protocolo cancelado"
        with pytest.raises(LifecycleError):
            move_to_queue(cancelled, "Carlos")
        with pytest.raises(LifecycleError):
            cancel(cancelled)

    def test_petitioned_is_final(self, protocol):
        done = set_status(protocol, "Peticionado", now=T1)

        assert done.activity_log[-1].description == "Protocolo peticionado com sucesso"
        with pytest.raises(LifecycleError):
            return_protocol(done, "tarde demais")


class TestDescribeChange:
    def test_queue_moves(self):
        assert describe_change("Aguardando", "Aguardando", "Carlos", None) == (
            "Movido da fila Carlos para fila do Robô"
        )
        assert describe_change("Aguardando", "Aguardando", None, "Deyse") == (
            "Movido da fila do Robô para fila Deyse"
        )
        assert describe_change("Aguardando", "Aguardando", "Carlos", "Deyse") == (
            "Movido da fila Carlos para fila Deyse"
        )

    def test_status_texts(self):
        assert describe_change("Aguardando", "Devolvido", None, None) == "Protocolo devolvido"
        assert describe_change("Em Execução", "Aguardando", None, None) == (
            "Protocolo aguardando processamento"
        )

    def test_nothing_changed(self):
        assert describe_change("Aguardando", "Aguardando", None, None) == "Protocolo atualizado"
