import secrets
import unittest
from random import Random
from typing import Any, Optional, TypeVar

from structlog import get_logger

from xmlrpc_serde.conf.settings import CodecSettings
from xmlrpc_serde.shapes import Shape, make_shape
from xmlrpc_serde.value import Value

logger = get_logger()

T = TypeVar('T')


class TestCase(unittest.TestCase):
    seed_config: Optional[int] = None

    def setUp(self) -> None:
        self.log = logger.new()
        self.seed = secrets.randbits(64) if self.seed_config is None else self.seed_config
        self.log.info('set seed', seed=self.seed)
        self.rng = Random(self.seed)

    def make_settings(self, **kwargs: Any) -> CodecSettings:
        return CodecSettings(**kwargs)

    def assertRoundTrip(self, type_: Any, value: T, *, settings: Optional[CodecSettings] = None) -> Value:
        """ Encode and decode the value with the shape of type_, check that it comes back equal and return the wire
        value in case the caller wants to check it too.
        """
        shape: Shape[T] = make_shape(type_)
        encoded = shape.encode_value(value, settings=settings)
        decoded = shape.decode_value(encoded, settings=settings)
        self.assertEqual(value, decoded)
        return encoded
