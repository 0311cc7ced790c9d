# stockfighter/api/envelope.py
from dataclasses import dataclass
from typing import Callable, Generic, Tuple, Type, TypeVar

from stockfighter.errors import DomainError, SerializationError
from stockfighter.logger import logger
from stockfighter.models import WireModel

T = TypeVar("T", bound=WireModel)

# A failure shape and the domain error it maps to
FailureShape = Tuple[Type[WireModel], Callable[[WireModel], DomainError]]


@dataclass(frozen=True)
class Envelope(Generic[T]):
    """
    The JSON shapes one endpoint may answer with.

    `success` is tried first, then each failure shape in order. An endpoint
    with no failure shapes is decoded single-shape.
    """
    success: Type[T]
    failures: Tuple[FailureShape, ...] = ()


def _preview(raw: bytes, limit: int = 200) -> str:
    text = raw.decode("utf-8", errors="replace")
    return text if len(text) <= limit else f"{text[:limit]}..."


def decode(raw: bytes, envelope: Envelope[T]) -> T:
    """
    Decode `raw` into the envelope's success shape.

    Raises the mapped DomainError when a failure shape matches instead, and
    SerializationError (carrying the success-shape diagnostic and the raw
    payload) when nothing matches.
    """
    try:
        return envelope.success.model_validate_json(raw)
    except ValueError as e:  # pydantic.ValidationError, invalid UTF-8
        diagnostic = e

    for shape, to_error in envelope.failures:
        try:
            failure = shape.model_validate_json(raw)
        except ValueError:
            continue
        error = to_error(failure)
        logger.warning(f"{envelope.success.__name__} request rejected: {error}")
        raise error

    logger.error(
        f"Response matched no known shape for {envelope.success.__name__}: "
        f"{_preview(raw)}"
    )
    raise SerializationError(
        f"Could not decode {envelope.success.__name__}: {diagnostic}",
        payload=raw
    ) from diagnostic
