from collections import namedtuple


CandidateField = namedtuple(
    "CandidateField",
    ["key", "attr", "csv_label", "display_name", "type"],
)


# ─────────────────────────────────────────────
# Canonical candidate fields (mappable from spreadsheets)
# Order matters: the column mapper and the import template follow it.
# ─────────────────────────────────────────────
CANDIDATE_FIELDS = [
    # Identification / contact
    CandidateField("fullName", "full_name", "Nome completo:", "Nome", "text"),
    CandidateField("email", "email", "E-mail principal:", "Email", "email"),
    CandidateField("email_secondary", "email_secondary", "Endereço de e-mail", "Email Secundário", "email"),
    CandidateField("phone", "phone", "Nº telefone celular / Whatsapp:", "Telefone", "phone"),
    CandidateField("city", "city", "Cidade onde reside:", "Cidade", "select"),

    # Personal
    CandidateField("birthDate", "birth_date", "Data de Nascimento:", "Data Nasc.", "date"),
    CandidateField("age", "age", "Idade", "Idade", "number"),
    CandidateField("maritalStatus", "marital_status", "Estado civil:", "Estado Civil", "select"),
    CandidateField("childrenCount", "children_count", "Se tem filhos, quantos?", "Filhos", "number"),
    CandidateField("photoUrl", "photo_url", "Nos envie uma foto atual que você goste:", "Foto", "url"),
    CandidateField("hasLicense", "has_license", "Você possui CNH tipo B?", "CNH", "boolean"),

    # Professional / academic
    CandidateField("education", "education", "Formação:", "Formação", "text"),
    CandidateField("schoolingLevel", "schooling_level", "Nível de escolaridade:", "Escolaridade", "select"),
    CandidateField("institution", "institution", "Instituição de ensino:", "Instituição", "text"),
    CandidateField("graduationDate", "graduation_date", "Data de formatura:", "Formatura", "date"),
    CandidateField("isStudying", "is_studying", "Em caso de curso superior, está cursando neste momento?", "Cursando", "boolean"),
    CandidateField("experience", "experience", "Experiências anteriores:", "Experiência", "textarea"),
    CandidateField("courses", "courses", "Cursos e certificações profissionais.", "Cursos", "textarea"),
    CandidateField("certifications", "certifications", "Certificações profissionais:", "Certificações", "textarea"),
    CandidateField("interestAreas", "interest_areas", "Áreas de interesse profissional", "Área de Interesse", "select"),

    # Links
    CandidateField("cvUrl", "cv_url", "Anexar currículo:", "CV", "url"),
    CandidateField("portfolioUrl", "portfolio_url", "Portfólio de trabalho:", "Portfólio", "url"),

    # Selection process
    CandidateField("source", "source", "Onde você nos encontrou?", "Fonte", "select"),
    CandidateField("referral", "referral", "Você foi indicado por algum colaborador da Young? Se sim, quem?", "Indicação", "text"),
    CandidateField("salaryExpectation", "salary_expectation", "Qual seria sua expectativa salarial?", "Pretensão Salarial", "text"),
    CandidateField("canRelocate", "can_relocate", "Teria disponibilidade para mudança de cidade?", "Disponível p/ Mudança", "boolean"),
    CandidateField("references", "references", "Referências profissionais:", "Referências", "textarea"),
    CandidateField("typeOfApp", "type_of_app", "Você está se candidatando a uma vaga específica...?", "Tipo de Candidatura", "text"),
    CandidateField("freeField", "free_field", "Campo Livre, SEJA VOCÊ!", "Observações Gerais", "textarea"),

    # Metadata
    CandidateField("original_timestamp", "original_timestamp", "Carimbo de data/hora", "Data Cadastro", "datetime"),
    CandidateField("external_id", "external_id", "COD", "Código Externo", "text"),
    CandidateField("status", "status", "Status", "Status", "select"),
]

FIELDS_BY_KEY = {f.key: f for f in CANDIDATE_FIELDS}
FIELD_KEYS = [f.key for f in CANDIDATE_FIELDS]

REQUIRED_IMPORT_FIELDS = ("fullName", "email")

DEFAULT_STATUS = "Inscrito"

# Fields that go through a catalog normalizer during import
NORMALIZED_FIELDS = {
    "city": "city",
    "source": "source",
    "interestAreas": "interest_area",
}

# Comma-separated fields, normalized item by item
LIST_FIELDS = ("interestAreas",)

# Kanban stages plus the statuses that close a selection process
PIPELINE_STAGES = [
    "Inscrito",
    "Considerado",
    "Entrevista I",
    "Testes",
    "Entrevista II",
    "Seleção",
]
CLOSING_STATUSES = ["Contratado", "Reprovado", "Desistiu da vaga"]
ALL_STATUSES = PIPELINE_STAGES + CLOSING_STATUSES


def get_field_display_name(key):
    field = FIELDS_BY_KEY.get(key)
    return field.display_name if field else key
