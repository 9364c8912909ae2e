"""Formatting helpers for results, errors and the history list."""

from datetime import datetime

from cinexpress.core.models import HistoryItem, OptimizedResult

HISTORY_LABEL_CHARS = 60


def format_director_note(result: OptimizedResult | None) -> str:
    if result is None:
        return "*Listo para rodar. Escribe una idea y pulsa **Generar Escena**.*"
    return f'### 🎬 Corte Final\n\n**Nota del Director**\n\n> "{result.explanation}"'


def format_error(message: str | None) -> str:
    if not message:
        return ""
    return f"❌ **ERROR EN SET:** {message}"


def format_history_label(item: HistoryItem) -> str:
    """One-line label: local time plus the start of the idea."""
    when = datetime.fromtimestamp(item.timestamp / 1000).strftime("%d/%m %H:%M")
    idea = " ".join(item.original_text.split()) or "(solo imágenes)"
    if len(idea) > HISTORY_LABEL_CHARS:
        idea = idea[: HISTORY_LABEL_CHARS - 1] + "…"
    return f"{when} · {idea}"


def format_history_choices(history: list[HistoryItem]) -> list[tuple[str, str]]:
    """Dropdown choices as (label, item_id), newest first."""
    return [(format_history_label(item), item.id) for item in history]
