from typing import Any, Iterable

from pydantic import BaseModel


def merge_partial(entity: Any, update: BaseModel, exclude: Iterable[str] = ()) -> Any:
    """
    Copies onto `entity` every field the client actually sent on `update`.

    Absent fields and explicit nulls keep the stored value, so a field cannot be
    cleared through a partial update. The caller persists the whole row.
    """
    data = update.model_dump(exclude_unset=True, exclude=set(exclude))
    for key, value in data.items():
        if value is None:
            continue
        if hasattr(entity, key):
            setattr(entity, key, value)
    return entity
