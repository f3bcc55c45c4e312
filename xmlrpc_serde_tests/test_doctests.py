import doctest
import importlib

import pytest

MODULES = [
    'xmlrpc_serde.api',
    'xmlrpc_serde.codecs.collection',
    'xmlrpc_serde.codecs.integer',
    'xmlrpc_serde.codecs.mapping',
    'xmlrpc_serde.codecs.optional',
    'xmlrpc_serde.codecs.struct',
    'xmlrpc_serde.codecs.tuple',
    'xmlrpc_serde.codecs.unit',
    'xmlrpc_serde.codecs.variant',
    'xmlrpc_serde.decoder',
    'xmlrpc_serde.exceptions',
    'xmlrpc_serde.messages',
    'xmlrpc_serde.shapes.any_shape',
    'xmlrpc_serde.shapes.dataclass_shape',
    'xmlrpc_serde.shapes.int_shape',
    'xmlrpc_serde.shapes.str_shape',
    'xmlrpc_serde.shapes.tuple_shape',
    'xmlrpc_serde.shapes.union_shape',
    'xmlrpc_serde.shapes.utils',
    'xmlrpc_serde.shapes.value_shape',
    'xmlrpc_serde.utils.typing',
    'xmlrpc_serde.value',
]


@pytest.mark.parametrize('module_name', MODULES)
def test_doctests(module_name: str) -> None:
    module = importlib.import_module(module_name)
    result = doctest.testmod(module)
    assert result.attempted > 0
    assert result.failed == 0
