"""Description text for ledger entries that mirror a debt payment."""

DESCRIPTION_PREFIX = "Pay debt"


def normalize_note(note: str | None) -> str | None:
    """Trim a note; blank notes become None."""
    if note is None:
        return None
    trimmed = note.strip()
    return trimmed or None


def build_description(debt_title: str, note: str | None) -> str:
    """
    Compose the description for a mirrored entry.

    >>> build_description("Cicilan Motor", "  bulan ke-3  ")
    'Pay debt: Cicilan Motor - bulan ke-3'
    """
    description = f"{DESCRIPTION_PREFIX}: {debt_title}"
    trimmed = normalize_note(note)
    if trimmed is not None:
        description = f"{description} - {trimmed}"
    return description
