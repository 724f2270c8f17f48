from uuid import UUID

import pytest

from metaverse_messages.complete_agent_movement import CompleteAgentMovement

AGENT = UUID("aaaaaaaa-bbbb-cccc-dddd-eeeeeeeeeeee")
SESSION = UUID("12345678-1234-5678-1234-567812345678")


def test_to_bytes_layout():
    data = CompleteAgentMovement(agent_id=AGENT, session_id=SESSION, circuit_code=4242).to_bytes()
    assert data[:16] == AGENT.bytes
    assert data[16:32] == SESSION.bytes
    assert data[32:] == (4242).to_bytes(4, "little")


def test_from_bytes_reads_code_first():
    data = (777).to_bytes(4, "little") + SESSION.bytes + AGENT.bytes
    parsed = CompleteAgentMovement.from_bytes(data)
    assert parsed == CompleteAgentMovement(agent_id=AGENT, session_id=SESSION, circuit_code=777)


def test_read_and_write_orders_differ():
    message = CompleteAgentMovement(agent_id=AGENT, session_id=SESSION, circuit_code=5)
    parsed = CompleteAgentMovement.from_bytes(message.to_bytes())
    assert parsed.session_id != SESSION or parsed.agent_id != AGENT
    assert len(message.to_bytes()) == 36


def test_truncated_raises():
    with pytest.raises(ValueError):
        CompleteAgentMovement.from_bytes(b"\x01\x02\x03")


def test_negative_code_raises():
    with pytest.raises(ValueError):
        CompleteAgentMovement(agent_id=AGENT, session_id=SESSION, circuit_code=-5).to_bytes()