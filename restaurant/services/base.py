"""
Shared plumbing for the collection services.
"""

from typing import Any, Iterable, List, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from restaurant.errors import RestaurantError, PersistenceError, ParseError, InvalidInputError
from restaurant.models.results import ErrorCode, OperationResult
from monitoring.logger import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def next_id(records: Iterable[Any]) -> int:
    """Max existing id plus one, starting at 1 for an empty collection."""
    return max((record.id for record in records), default=0) + 1


def coerce_draft(draft_cls: Type[ModelT], draft: Union[ModelT, dict]) -> ModelT:
    """Accept a draft model or a plain dict of fields."""
    if isinstance(draft, draft_cls):
        return draft
    if isinstance(draft, BaseModel):
        draft = draft.model_dump(by_alias=True)
    if not isinstance(draft, dict):
        raise InvalidInputError(f"Expected {draft_cls.__name__} or dict, got {type(draft).__name__}")
    return draft_cls.model_validate(draft)


def validation_message(error: ValidationError) -> str:
    details = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"]) or "value"
        details.append(f"{location}: {err['msg']}")
    return "; ".join(details)


class CollectionService:
    """Base class binding a service to the store(s) it reads and writes."""

    collection_name = "records"

    def _parse(self, model_cls: Type[ModelT], raw: Any) -> ModelT:
        """Validate a stored record, reporting a bad shape as a parse failure."""
        try:
            return model_cls.model_validate(raw)
        except ValidationError as e:
            raise ParseError(
                f"Malformed {self.collection_name} document: {validation_message(e)}"
            ) from e

    def _parse_list(self, model_cls: Type[ModelT], raw: Any) -> List[ModelT]:
        if not isinstance(raw, list):
            raise ParseError(
                f"Malformed {self.collection_name} document: expected a list, got {type(raw).__name__}"
            )
        return [self._parse(model_cls, record) for record in raw]

    def _failure(self, error: Exception, action: str) -> OperationResult:
        """Log an expected failure and turn it into a failed result."""
        if isinstance(error, ValidationError):
            message = validation_message(error)
            logger.warning(f"Invalid input while {action}: {message}")
            return OperationResult.failure(ErrorCode.VALIDATION_ERROR, message)

        if isinstance(error, PersistenceError):
            logger.error(f"Error {action}: {error}", exc_info=True)
        else:
            logger.warning(f"Could not finish {action}: {error}")

        code = error.code if isinstance(error, RestaurantError) else ErrorCode.PERSISTENCE_ERROR
        return OperationResult.failure(code, str(error))
