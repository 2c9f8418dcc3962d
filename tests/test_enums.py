import pytest

from starknet_indexer.storage.enums import (
    CallType,
    ClassType,
    EntrypointType,
    class_type_from_interfaces,
)


@pytest.mark.parametrize(
    "types, want",
    [
        ([ClassType.ERC20], 1),
        ([ClassType.ERC20, ClassType.ERC721], 3),
    ],
)
def test_class_type_set(types, want):
    assert ClassType(0).with_types(*types) == ClassType(want)


@pytest.mark.parametrize(
    "ct, check, want",
    [
        (ClassType.ERC20, ClassType.ERC20, True),
        (ClassType.ERC1155, ClassType.ERC20, False),
    ],
)
def test_class_type_is(ct, check, want):
    assert ct.has(check) is want


def test_with_types_does_not_change_original():
    base = ClassType.ERC20
    combined = base.with_types(ClassType.PROXY)
    assert base == ClassType.ERC20
    assert combined.has(ClassType.PROXY)
    assert combined.has(ClassType.ERC20)


def test_one_of():
    ct = ClassType(0).with_types(ClassType.ERC721, ClassType.BRAAVOS)
    assert ct.one_of(ClassType.ERC20, ClassType.BRAAVOS)
    assert not ct.one_of(ClassType.ERC20, ClassType.ACCOUNT)
    assert not ct.one_of()


def test_class_type_from_interfaces_proxy_aliases():
    assert class_type_from_interfaces("proxy") == ClassType.PROXY
    assert class_type_from_interfaces("proxy_l1") == ClassType.PROXY
    assert class_type_from_interfaces("proxy", "proxy_l1") == ClassType.PROXY


def test_class_type_from_interfaces_combines_and_ignores_unknown():
    ct = class_type_from_interfaces("erc20", "account", "something_else")
    assert ct == ClassType.ERC20 | ClassType.ACCOUNT
    assert class_type_from_interfaces() == ClassType(0)


@pytest.mark.parametrize(
    "name, member",
    [
        ("erc721_metadata", ClassType.ERC721_METADATA),
        ("erc721_receiver", ClassType.ERC721_RECEIVER),
        ("erc1155", ClassType.ERC1155),
        ("erc1155_metadata", ClassType.ERC1155_METADATA),
        ("erc1155_receiver", ClassType.ERC1155_RECEIVER),
        ("argentx", ClassType.ARGENTX),
        ("argentx_0", ClassType.ARGENTX_0),
        ("braavos", ClassType.BRAAVOS),
    ],
)
def test_class_type_from_interface_names(name, member):
    assert class_type_from_interfaces(name) == member


@pytest.mark.parametrize("member", [CallType.CALL, CallType.DELEGATE])
def test_call_type_round_trip(member):
    assert CallType.parse(str(member)) is member


def test_call_type_unknown():
    assert CallType.parse("LIBRARY_CALL") is CallType.UNKNOWN
    assert str(CallType.UNKNOWN) == "UNKNOWN"
    assert int(CallType.parse("DELEGATE")) == 3


@pytest.mark.parametrize(
    "member",
    [EntrypointType.EXTERNAL, EntrypointType.CONSTRUCTOR, EntrypointType.L1_HANDLER],
)
def test_entrypoint_type_round_trip(member):
    assert EntrypointType.parse(str(member)) is member


def test_entrypoint_type_unknown():
    assert EntrypointType.parse("") is EntrypointType.UNKNOWN
    assert str(EntrypointType.UNKNOWN) == "UNKNOWN"
    assert int(EntrypointType.parse("L1_HANDLER")) == 4