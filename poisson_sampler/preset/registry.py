# ========================
# file: poisson_sampler/preset/registry.py
# ========================
from __future__ import annotations
from typing import List
import os

from .defaults import BUILTIN_PRESETS_DIR
from .errors import NotFoundError

PRESET_SUFFIX = ".json"

# Встроенная папка всегда первая; приложение может добавить свои
_SEARCH_FOLDERS: List[str] = [BUILTIN_PRESETS_DIR]


def search_folders() -> List[str]:
    return list(_SEARCH_FOLDERS)


def add_search_folder(path: str) -> None:
    path = os.path.abspath(path)
    if path not in _SEARCH_FOLDERS:
        _SEARCH_FOLDERS.append(path)


def remove_search_folder(path: str) -> None:
    """Убирает пользовательскую папку; встроенную убрать нельзя."""
    path = os.path.abspath(path)
    if path != BUILTIN_PRESETS_DIR and path in _SEARCH_FOLDERS:
        _SEARCH_FOLDERS.remove(path)


def resolve_preset_path(preset_id: str) -> str:
    """'forest_scatter' или 'props/rocks' -> путь к JSON в первой папке, где он найден."""
    rel = preset_id.replace("\\", "/").strip("/")
    if not rel.endswith(PRESET_SUFFIX):
        rel += PRESET_SUFFIX
    for root in _SEARCH_FOLDERS:
        candidate = os.path.join(root, rel)
        if os.path.isfile(candidate):
            return candidate
    raise NotFoundError(
        f"Sampling preset '{preset_id}' not found; known ids: {', '.join(list_preset_ids()) or '-'}"
    )


def list_preset_ids() -> List[str]:
    """Все id пресетов во всех папках поиска (без дублей, по алфавиту)."""
    ids = set()
    for root in _SEARCH_FOLDERS:
        if not os.path.isdir(root):
            continue
        for dirpath, _, files in os.walk(root):
            for name in files:
                if name.endswith(PRESET_SUFFIX):
                    rel = os.path.relpath(os.path.join(dirpath, name), root)
                    ids.add(rel[: -len(PRESET_SUFFIX)].replace(os.sep, "/"))
    return sorted(ids)
