"""Static catalog of supported Nature Portfolio journals and their URL slugs."""

from __future__ import annotations

from models import JournalEntry

# Slug is the path segment used on nature.com, e.g. https://www.nature.com/nbt/
_CATALOG: tuple[JournalEntry, ...] = tuple(
    JournalEntry(name=name, slug=slug)
    for name, slug in (
        ("Nature", "nature"),
        ("Nature Aging", "nataging"),
        ("Nature Astronomy", "natastron"),
        ("Nature Biomedical Engineering", "natbiomedeng"),
        ("Nature Biotechnology", "nbt"),
        ("Nature Cancer", "natcancer"),
        ("Nature Cardiovascular Research", "natcardiovascres"),
        ("Nature Catalysis", "natcatal"),
        ("Nature Cell Biology", "ncb"),
        ("Nature Chemical Biology", "nchembio"),
        ("Nature Chemical Engineering", "natchemeng"),
        ("Nature Chemistry", "nchem"),
        ("Nature Cities", "natcities"),
        ("Nature Climate Change", "nclimate"),
        ("Nature Communications", "ncomms"),
        ("Nature Computational Science", "natcomputsci"),
        ("Nature Ecology & Evolution", "natecolevol"),
        ("Nature Electronics", "natelectron"),
        ("Nature Energy", "nenergy"),
        ("Nature Food", "natfood"),
        ("Nature Genetics", "ng"),
        ("Nature Geoscience", "ngeo"),
        ("Nature Human Behaviour", "nathumbehav"),
        ("Nature Immunology", "ni"),
        ("Nature Machine Intelligence", "natmachintell"),
        ("Nature Materials", "nmat"),
        ("Nature Medicine", "nm"),
        ("Nature Mental Health", "natmentalhealth"),
        ("Nature Metabolism", "natmetab"),
        ("Nature Methods", "nmeth"),
        ("Nature Microbiology", "nmicrobiol"),
        ("Nature Nanotechnology", "nnano"),
        ("Nature Neuroscience", "neuro"),
        ("Nature Photonics", "nphoton"),
        ("Nature Physics", "nphys"),
        ("Nature Plants", "nplants"),
        ("Nature Protocols", "nprot"),
        ("Nature Reviews Biodiversity", "nrbd"),
        ("Nature Reviews Bioengineering", "natrevbioeng"),
        ("Nature Reviews Cancer", "nrc"),
        ("Nature Reviews Cardiology", "nrcardio"),
        ("Nature Reviews Chemistry", "natrevchem"),
        ("Nature Reviews Clean Technology", "nrct"),
        ("Nature Reviews Clinical Oncology", "nrclinonc"),
        ("Nature Reviews Disease Primers", "nrdp"),
        ("Nature Reviews Drug Discovery", "nrd"),
        ("Nature Reviews Earth & Environment", "natrevearthenviron"),
        ("Nature Reviews Electrical Engineering", "natrevelectreng"),
        ("Nature Reviews Endocrinology", "nrendo"),
        ("Nature Reviews Gastroenterology & Hepatology", "nrgastro"),
        ("Nature Reviews Genetics", "nrg"),
        ("Nature Reviews Immunology", "nri"),
        ("Nature Reviews Materials", "natrevmats"),
        ("Nature Reviews Methods Primers", "nrmp"),
        ("Nature Reviews Microbiology", "nrmicro"),
        ("Nature Reviews Molecular Cell Biology", "nrmcb"),
        ("Nature Reviews Nephrology", "nrneph"),
        ("Nature Reviews Neurology", "nrneurol"),
        ("Nature Reviews Neuroscience", "nrn"),
        ("Nature Reviews Physics", "natrevphys"),
        ("Nature Reviews Psychology", "nrpsychol"),
        ("Nature Reviews Rheumatology", "nrrheum"),
        ("Nature Reviews Urology", "nrurol"),
        ("Nature Sensors", "natsensors"),
        ("Nature Structural & Molecular Biology", "nsmb"),
        ("Nature Sustainability", "natsustain"),
        ("Nature Synthesis", "natsynth"),
        ("Nature Water", "natwater"),
    )
)

_BY_LOWER_NAME: dict[str, JournalEntry] = {entry.name.lower(): entry for entry in _CATALOG}


def lookup(name: str) -> JournalEntry | None:
    """Return the catalog entry whose name matches ``name`` ignoring case.

    Exact match only; no partial or fuzzy matching. Returns None when absent.
    """
    if not isinstance(name, str):
        return None
    return _BY_LOWER_NAME.get(name.lower())


def list_all() -> tuple[JournalEntry, ...]:
    """Return the full catalog in declaration order."""
    return _CATALOG


def find_journals(name: str | None = None) -> list[JournalEntry]:
    """List all journals, or only the one matching ``name`` (case-insensitive)."""
    if name is None:
        return list(_CATALOG)
    entry = lookup(name)
    return [entry] if entry is not None else []
