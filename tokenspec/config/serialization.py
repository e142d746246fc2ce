"""Serialization of tokenization specs and configurations to YAML."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel


def spec_to_dict(model: BaseModel, include_defaults: bool = False) -> dict[str, Any]:
    """Convert a spec or configuration to a plain dictionary.

    Parameters
    ----------
    model : BaseModel
        ``TokenizationSpec`` or ``TokConfig`` to convert.
    include_defaults : bool
        Whether to include fields left at their default values.

    Returns
    -------
    dict[str, Any]
        JSON-compatible dictionary.

    Examples
    --------
    >>> from tokenspec.tokenization.spec import TokenizationSpec
    >>> spec_to_dict(TokenizationSpec(strategy="unicode_word"))
    {'strategy': 'unicode_word'}
    """
    return model.model_dump(mode="json", exclude_defaults=not include_defaults)


def to_yaml(model: BaseModel, include_defaults: bool = False) -> str:
    """Serialize a spec or configuration to a YAML string.

    Parameters
    ----------
    model : BaseModel
        Model to serialize.
    include_defaults : bool
        If True, include all fields even if they have default values.

    Returns
    -------
    str
        YAML representation.
    """
    return yaml.dump(
        spec_to_dict(model, include_defaults=include_defaults),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        indent=2,
    )


def save_yaml(
    model: BaseModel,
    path: Path | str,
    include_defaults: bool = False,
    create_dirs: bool = True,
) -> None:
    """Save a spec or configuration to a YAML file.

    Parameters
    ----------
    model : BaseModel
        Model to save.
    path : Path | str
        Destination file.
    include_defaults : bool
        If True, include all fields even if they have default values.
    create_dirs : bool
        If True, create parent directories if they don't exist.

    Raises
    ------
    FileNotFoundError
        If create_dirs is False and parent directory doesn't exist.
    """
    path = Path(path)

    if create_dirs:
        path.parent.mkdir(parents=True, exist_ok=True)
    elif not path.parent.exists():
        raise FileNotFoundError(
            f"Parent directory does not exist: {path.parent}. "
            f"Set create_dirs=True to create it automatically."
        )

    path.write_text(to_yaml(model, include_defaults=include_defaults), encoding="utf-8")
