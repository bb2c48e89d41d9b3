import re
import unicodedata

from candidates.normalization.catalogs import (
    MAIN_CITIES,
    MAIN_SOURCES,
    MAIN_INTEREST_AREAS,
)
from config.settings import DEFAULT_CITY_REGION


BRAZILIAN_STATES = (
    "RS", "SC", "PR", "SP", "RJ", "MG", "ES", "BA", "SE", "AL", "PE", "PB", "RN",
    "CE", "PI", "MA", "PA", "AP", "AM", "AC", "RO", "RR", "TO", "GO", "MT", "MS", "DF",
)
STATE_TOKEN_RE = re.compile(r"\b(" + "|".join(BRAZILIAN_STATES) + r")\b", re.IGNORECASE)


def fold_accents(text: str) -> str:
    """Strip diacritics: NFD decomposition, then drop combining marks."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def title_words(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split())


class CatalogNormalizer:
    """
    Maps free text to one canonical label of a static catalog.

    Passes, first match wins:
      1. input equals a label (case-insensitive)
      2. accent-folded input equals a folded variant
      3. folded input contains a variant, or a variant contains it
      4. folded input contains a label, or a label contains it
      5. fallback: title-case the words (city: append the default region)

    Passes 3 and 4 walk the catalog in declaration order, so earlier
    entries win ambiguous short inputs.
    """

    def __init__(self, name, catalog, variant_min_length=2, label_min_length=3, region=None):
        self.name = name
        self.catalog = catalog
        self.variant_min_length = variant_min_length
        self.label_min_length = label_min_length
        self.region = region

        self._entries = [
            (
                label,
                label.lower(),
                fold_accents(label.lower()),
                [fold_accents(v.lower()) for v in variants],
            )
            for label, variants in catalog.items()
        ]

    @property
    def labels(self):
        return list(self.catalog.keys())

    def normalize(self, value) -> str:
        if not value or not isinstance(value, str):
            return ""

        cleaned = value.strip()
        if not cleaned:
            return ""

        lowered = cleaned.lower()
        folded = fold_accents(lowered)

        for label, label_lower, _, _ in self._entries:
            if lowered == label_lower:
                return label

        for label, _, folded_label, variants in self._entries:
            if folded == folded_label or folded in variants:
                return label

        if len(folded) > self.variant_min_length:
            for label, _, _, variants in self._entries:
                for variant in variants:
                    if len(variant) <= self.variant_min_length:
                        continue
                    if variant in folded or folded in variant:
                        return label

        if len(folded) > self.label_min_length:
            for label, _, folded_label, _ in self._entries:
                if len(folded_label) <= self.label_min_length:
                    continue
                if folded_label in folded or folded in folded_label:
                    return label

        return self._fallback(cleaned)

    def normalize_list(self, value) -> str:
        """Normalize a comma-separated list, dropping blanks and repeats."""
        if not value or not isinstance(value, str):
            return ""

        result = []
        for part in value.split(","):
            normalized = self.normalize(part.strip())
            if normalized and normalized not in result:
                result.append(normalized)

        return ", ".join(result)

    def is_main(self, value) -> bool:
        if not value:
            return False
        return self.normalize(value) in self.catalog

    def options(self):
        return [{"id": index, "name": label} for index, label in enumerate(self.catalog)]

    def _fallback(self, cleaned):
        formatted = title_words(cleaned)

        if not self.region:
            return formatted

        # "Curitiba/pr" -> "Curitiba/PR"
        formatted = STATE_TOKEN_RE.sub(lambda m: m.group(0).upper(), formatted)

        if "/" not in formatted and not STATE_TOKEN_RE.search(formatted):
            formatted = f"{formatted}/{self.region}"

        return formatted


NORMALIZERS = {
    "city": CatalogNormalizer(
        "city", MAIN_CITIES, label_min_length=5, region=DEFAULT_CITY_REGION
    ),
    "source": CatalogNormalizer("source", MAIN_SOURCES),
    "interest_area": CatalogNormalizer("interest_area", MAIN_INTEREST_AREAS),
}


def get_normalizer(catalog_name) -> CatalogNormalizer:
    try:
        return NORMALIZERS[catalog_name]
    except KeyError:
        raise ValueError(f"Unknown catalog: {catalog_name}") from None


def normalize(catalog_name, value) -> str:
    return get_normalizer(catalog_name).normalize(value)


def normalize_list(catalog_name, value) -> str:
    return get_normalizer(catalog_name).normalize_list(value)


def get_options(catalog_name):
    return get_normalizer(catalog_name).options()


def is_main(catalog_name, value) -> bool:
    return get_normalizer(catalog_name).is_main(value)


def normalize_city(value) -> str:
    return NORMALIZERS["city"].normalize(value)


def normalize_source(value) -> str:
    return NORMALIZERS["source"].normalize(value)


def normalize_interest_area(value) -> str:
    return NORMALIZERS["interest_area"].normalize(value)


def normalize_interest_areas(value) -> str:
    return NORMALIZERS["interest_area"].normalize_list(value)
