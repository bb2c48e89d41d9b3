"""
Header -> candidate field inference for spreadsheet imports.

Each header goes through three layers, first hit wins:

1. exact label match against the canonical field labels
   (case and accent insensitive, trailing colon ignored)
2. keyword overlap / full-text containment against those labels
3. an ordered table of keyword rules

Headers nothing matches stay unmapped (ignored on import). The result is
a ColumnMapping the operator can still override column by column.
"""
import re
from typing import Dict, List, Optional

from candidates.exceptions import UnknownField
from candidates.fields import CANDIDATE_FIELDS, FIELD_KEYS, REQUIRED_IMPORT_FIELDS
from candidates.normalization.normalizer import fold_accents
from config.logger import logger


MIN_KEYWORD_LENGTH = 4

# Filler words that say nothing about which field a column holds
STOPWORDS = {
    "para", "onde", "voce", "qual", "quais", "seria", "teria", "algum",
    "alguma", "caso", "esta", "neste", "momento", "quem", "atual", "como",
    "quantos", "tipo", "nos", "envie", "goste", "seja",
}

TOKEN_SPLIT_RE = re.compile(r"[^\w&-]+")


def fold_header(text) -> str:
    return fold_accents(str(text).lower()).strip()


def strip_label(text) -> str:
    return fold_header(text).rstrip(":").strip()


def keywords(text) -> List[str]:
    return [
        token for token in TOKEN_SPLIT_RE.split(fold_header(text))
        if len(token) >= MIN_KEYWORD_LENGTH and token not in STOPWORDS
    ]


# ─────────────────────────────────────────────
# Keyword rule predicates
# ─────────────────────────────────────────────
def contains(*terms):
    return lambda header: any(term in header for term in terms)


def has_word(*words):
    pattern = re.compile(r"\b(" + "|".join(re.escape(w) for w in words) + r")\b")
    return lambda header: bool(pattern.search(header))


def any_of(*predicates):
    return lambda header: any(p(header) for p in predicates)


def all_of(*predicates):
    return lambda header: all(p(header) for p in predicates)


def none_of(*predicates):
    return lambda header: not any(p(header) for p in predicates)


# "Nome da instituição", "Nome social"
NOT_PERSON_NAME = contains("instituicao", "social")

# Evaluated top to bottom against the folded header; first match wins.
KEYWORD_RULES = [
    (any_of(
        contains("nome completo"),
        all_of(has_word("nome"), none_of(NOT_PERSON_NAME)),
    ), "fullName"),
    (contains(
        "e-mail secundario", "email secundario", "e-mail alternativo",
        "email alternativo", "segundo e-mail", "segundo email",
    ), "email_secondary"),
    (contains("e-mail", "email", "mail"), "email"),
    (contains("telefone", "celular", "whatsapp", "fone"), "phone"),
    (contains("mudanca", "mudar de cidade", "relocar", "realocar"), "canRelocate"),
    (contains("cidade", "municipio"), "city"),
    (contains(
        "onde voce nos encontrou", "onde encontrou", "como soube", "fonte", "origem",
    ), "source"),
    (contains("areas de interesse", "area de interesse", "area interesse", "interesse"), "interestAreas"),
    (contains("escolaridade"), "schoolingLevel"),
    (contains("instituicao", "universidade", "faculdade"), "institution"),
    (contains("formatura", "conclusao"), "graduationDate"),
    (contains("cursando", "estudando"), "isStudying"),
    (contains("formacao", "graduacao"), "education"),
    (any_of(contains("curriculo", "resume"), has_word("cv")), "cvUrl"),
    (contains("portfolio"), "portfolioUrl"),
    (contains("foto", "photo"), "photoUrl"),
    (any_of(has_word("cnh"), contains("carteira de motorista", "habilitacao")), "hasLicense"),
    (contains("estado civil"), "maritalStatus"),
    (contains("filhos"), "childrenCount"),
    (contains("nascimento"), "birthDate"),
    (has_word("idade"), "age"),
    (contains("experiencia"), "experience"),
    (has_word("cursos", "curso"), "courses"),
    (contains("certificac"), "certifications"),
    (contains("indicad", "indicacao"), "referral"),
    (contains("salari", "pretensao"), "salaryExpectation"),
    (contains("referencia"), "references"),
    (contains("vaga especifica", "tipo de candidatura"), "typeOfApp"),
    (contains("campo livre", "observac"), "freeField"),
    (any_of(contains("carimbo", "timestamp", "data/hora")), "original_timestamp"),
    (any_of(has_word("cod", "id"), contains("codigo")), "external_id"),
    (has_word("status", "situacao"), "status"),
]


def _label_index():
    labels = [(f.key, strip_label(f.csv_label)) for f in CANDIDATE_FIELDS]

    owners = {}
    for key, label in labels:
        for token in set(keywords(label)):
            owners.setdefault(token, set()).add(key)

    # A keyword shared by several labels ("e-mail", "data") points nowhere
    distinctive = {
        key: [t for t in keywords(label) if len(owners[t]) == 1]
        for key, label in labels
    }
    return labels, distinctive


LABELS, LABEL_KEYWORDS = _label_index()

# Headers that share a keyword with a label but name something else
LABEL_EXCLUSIONS = {
    "fullName": NOT_PERSON_NAME,
}


def match_exact_label(header) -> Optional[str]:
    wanted = strip_label(header)
    for key, label in LABELS:
        if label == wanted:
            return key
    return None


def match_label_keywords(header) -> Optional[str]:
    folded = strip_label(header)
    header_keywords = keywords(folded)

    for key, label in LABELS:
        excluded = LABEL_EXCLUSIONS.get(key)
        if excluded and excluded(folded):
            continue

        if len(folded) >= MIN_KEYWORD_LENGTH and (label in folded or folded in label):
            return key

        for lk in LABEL_KEYWORDS[key]:
            if any(lk in hk or hk in lk for hk in header_keywords):
                return key
    return None


def match_keyword_rules(header) -> Optional[str]:
    folded = fold_header(header)
    for predicate, key in KEYWORD_RULES:
        if predicate(folded):
            return key
    return None


def infer_field(header) -> Optional[str]:
    if not header or not str(header).strip():
        return None

    return (
        match_exact_label(header)
        or match_label_keywords(header)
        or match_keyword_rules(header)
    )


def infer_mapping(headers, warnings=None) -> Dict[str, Optional[str]]:
    """
    Infer a field per header. A field already claimed by an earlier
    header is not assigned again; the later header stays unmapped and a
    warning is appended to ``warnings`` when given.
    """
    mapping = {}
    claimed = {}
    for header in headers:
        field = infer_field(header)
        if field and field in claimed:
            if warnings is not None:
                warnings.append(
                    f"Column '{header}' looks like {field}, already mapped from "
                    f"'{claimed[field]}'; left unmapped"
                )
            field = None
        elif field:
            claimed[field] = header
        mapping[header] = field
    return mapping


class ColumnMapping:
    """
    Editable header -> field mapping for one import.

    A header mapped to None is ignored on import.
    """

    def __init__(self, headers, mapping=None):
        self.headers = list(headers)
        self._mapping = {h: None for h in self.headers}
        self.warnings = []
        for header, field in (mapping or {}).items():
            self.set(header, field)

    @classmethod
    def infer(cls, headers):
        warnings = []
        mapping = cls(headers, infer_mapping(headers, warnings))
        mapping.warnings = warnings
        for warning in warnings:
            logger.warning(warning)
        logger.info(
            f"Auto-mapped {len(mapping.mapped_headers())} of {len(mapping.headers)} columns"
        )
        return mapping

    def set(self, header, field):
        if header not in self._mapping:
            raise UnknownField(f"Unknown column: {header}", header=header)

        if not field:
            self._mapping[header] = None
            return

        if field not in FIELD_KEYS:
            raise UnknownField(f"Unknown candidate field: {field}", field=field)

        self._mapping[header] = field

    def get(self, header):
        return self._mapping.get(header)

    def mapped_headers(self):
        return [h for h in self.headers if self._mapping[h]]

    def mapped_fields(self):
        return [self._mapping[h] for h in self.mapped_headers()]

    def missing_required(self):
        mapped = set(self.mapped_fields())
        return [f for f in REQUIRED_IMPORT_FIELDS if f not in mapped]

    def items(self):
        return [(h, self._mapping[h]) for h in self.headers]

    def as_dict(self):
        return dict(self.items())

    def __repr__(self):
        return f"<ColumnMapping {len(self.mapped_headers())}/{len(self.headers)} mapped>"
