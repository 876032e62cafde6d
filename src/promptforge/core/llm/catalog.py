"""Suggested small models for local previews (MLC builds)."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class ModelInfo:
    id: str
    name: str
    size: str
    speed: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


MODEL_CATALOG: tuple[ModelInfo, ...] = (
    ModelInfo("Llama-3.2-1B-Instruct-q4f32_1-MLC", "Llama 3.2 1B", "0.6 GB", "Fast"),
    ModelInfo("Llama-3.2-3B-Instruct-q4f32_1-MLC", "Llama 3.2 3B", "1.8 GB", "Medium"),
    ModelInfo("SmolLM2-1.7B-Instruct-q4f32_1-MLC", "SmolLM2 1.7B", "1 GB", "Fast"),
    ModelInfo("Phi-3.5-mini-instruct-q4f32_1-MLC", "Phi 3.5 Mini", "2.2 GB", "Medium"),
    ModelInfo("Qwen2.5-1.5B-Instruct-q4f32_1-MLC", "Qwen 2.5 1.5B", "0.9 GB", "Fast"),
    ModelInfo("gemma-2-2b-it-q4f32_1-MLC", "Gemma 2 2B", "1.4 GB", "Fast"),
)

DEFAULT_MODEL_ID = MODEL_CATALOG[0].id


def get_model_info(model_id: str) -> ModelInfo | None:
    return next((m for m in MODEL_CATALOG if m.id == model_id), None)
