from dataclasses import fields

from metaverse_messages.simulator_login_protocol import (
    SimulatorLoginOptions,
    SimulatorLoginProtocol,
)


def test_default_options_are_empty():
    assert SimulatorLoginOptions().to_value() == []


def test_false_options_are_omitted():
    assert SimulatorLoginOptions(gestures=False, buddy_list=None).to_value() == []


def test_selected_options_use_wire_names_in_order():
    options = SimulatorLoginOptions(ui_config=True, buddy_list=True, adult_compliant=True)
    assert options.to_value() == ["adult_compliant", "buddy-list", "ui-config"]


def test_all_options_enabled():
    options = SimulatorLoginOptions(**{f.name: True for f in fields(SimulatorLoginOptions)})
    value = options.to_value()
    assert len(value) == len(fields(SimulatorLoginOptions))
    assert value[0] == "adult_compliant"
    assert value[-1] == "voice-config"
    assert "inventory-skel-lib" in value
    assert "max-agent-groups" in value
    assert "max_groups" in value


def test_protocol_value_omits_unset_optionals():
    value = SimulatorLoginProtocol(first="default", last="user").to_value()
    assert value["first"] == "default"
    assert value["last"] == "user"
    assert "viewer_digest" not in value
    assert "last_exec_event" not in value
    assert "skipoptional" not in value
    assert value["options"] == []


def test_protocol_flags_encoded_as_ints():
    value = SimulatorLoginProtocol(
        agree_to_tos=True, read_critical=False, extended_errors=True
    ).to_value()
    assert value["agree_to_tos"] == 1
    assert value["read_critical"] == 0
    assert value["extended_errors"] == 1


def test_protocol_includes_set_optionals():
    protocol = SimulatorLoginProtocol(
        viewer_digest="unused",
        last_exec_event=3,
        skipoptional=True,
        address_size=64,
        options=SimulatorLoginOptions(gestures=True),
    )
    value = protocol.to_value()
    assert value["viewer_digest"] == "unused"
    assert value["last_exec_event"] == 3
    assert value["skipoptional"] is True
    assert value["address_size"] == 64
    assert value["options"] == ["gestures"]


def test_protocol_keys_are_sorted():
    value = SimulatorLoginProtocol(viewer_digest="unused").to_value()
    keys = list(value)
    assert keys == sorted(keys)
    assert len(keys) == 21