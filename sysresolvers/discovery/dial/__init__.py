from .intercepting_backend import (
    DialFunc as DialFunc,
    InterceptingBackend as InterceptingBackend,
)
