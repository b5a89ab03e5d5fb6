"""JSON loading for league data files."""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger('pokerleague.utils')


def load_json(path: Path | str, schema: type[T] | None = None) -> Any | T:
    """
    Read a JSON file, validating it against a pydantic model when given.

    Raises:
        FileNotFoundError: If the file is missing
        json.JSONDecodeError: If the file is not valid JSON
        ValueError: If the data does not match the schema
    """
    path = Path(path)
    if not path.is_file():
        logger.error(f'League data file not found: {path}')
        raise FileNotFoundError(f'File not found: {path}')

    text = path.read_text(encoding='utf-8')
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f'Invalid JSON in {path} (line {e.lineno}): {e.msg}')
        raise json.JSONDecodeError(f'Invalid JSON in {path}: {e.msg}', e.doc, e.pos) from e

    if schema is None:
        return data

    try:
        return schema.model_validate(data)
    except ValidationError as e:
        logger.error(f'{path} does not match {schema.__name__}: {e.error_count()} error(s)')
        raise ValueError(f'Schema validation failed for {path}:\n{e}') from e
