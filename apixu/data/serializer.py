"""
Response body deserialization.

The client facade only knows the Serializer interface; PydanticSerializer
is the default implementation and builds the models in apixu.data.models
straight from the JSON body.
"""

import logging
from abc import ABC, abstractmethod
from typing import Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from apixu.api.exceptions import DeserializationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class Serializer(ABC):
    """Abstract base class for response body deserializers."""

    @abstractmethod
    def unserialize(self, data: Union[str, bytes], target: Type[ModelT]) -> ModelT:
        """
        Convert a raw response body into an instance of `target`.

        Args:
            data: Raw response body
            target: Model class to build

        Returns:
            Populated `target` instance

        Raises:
            DeserializationError: If the body does not match `target`
        """
        pass


class PydanticSerializer(Serializer):
    """Deserialize JSON bodies with Pydantic model validation."""

    def unserialize(self, data: Union[str, bytes], target: Type[ModelT]) -> ModelT:
        try:
            result = target.model_validate_json(data)
        except ValidationError as e:
            raise DeserializationError(
                f"Invalid {target.__name__} payload: {e.error_count()} validation error(s)\n{e}"
            ) from e

        logger.debug(f"Deserialized {target.__name__} from {len(data)} bytes")
        return result
