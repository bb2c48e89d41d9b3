import csv
import io
from datetime import date

import pandas as pd

from candidates.fields import CANDIDATE_FIELDS


TEMPLATE_FORMATS = ("csv", "xlsx")
TEMPLATE_SHEET_NAME = "Candidatos"

CONTENT_TYPES = {
    "csv": "text/csv; charset=utf-8",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}

EXAMPLE_ROWS = [
    {
        "fullName": "João Silva",
        "email": "joao@email.com",
        "phone": "(51) 99999-9999",
        "city": "Porto Alegre/RS",
        "birthDate": "1990-01-15",
        "age": "34",
        "maritalStatus": "Solteiro",
        "childrenCount": "0",
        "photoUrl": "https://exemplo.com/foto.jpg",
        "hasLicense": "Sim",
        "education": "Engenharia de Software",
        "schoolingLevel": "Superior Completo",
        "institution": "Universidade XYZ",
        "graduationDate": "2015-12-20",
        "isStudying": "Não",
        "experience": "5 anos como desenvolvedor",
        "courses": "Curso de React, Node.js",
        "certifications": "Certificação AWS",
        "interestAreas": "Desenvolvimento, Tecnologia",
        "cvUrl": "https://exemplo.com/cv.pdf",
        "portfolioUrl": "https://exemplo.com/portfolio",
        "source": "LinkedIn",
        "referral": "Maria Santos",
        "salaryExpectation": "R$ 8.000",
        "canRelocate": "Sim",
        "references": "Referência 1, Referência 2",
        "typeOfApp": "Vaga Específica",
        "freeField": "Informações adicionais",
        "original_timestamp": "2024-12-04T10:30:00",
        "external_id": "COD123",
    },
    {
        "fullName": "Ana Souza",
        "email": "ana.souza@email.com",
        "email_secondary": "ana.trabalho@email.com",
        "phone": "(54) 98888-7777",
        "city": "Caxias do Sul/RS",
        "birthDate": "1996-07-02",
        "schoolingLevel": "Superior Incompleto",
        "institution": "UCS",
        "isStudying": "Sim",
        "interestAreas": "Marketing, Comercial",
        "source": "Instagram",
        "canRelocate": "Não",
        "typeOfApp": "Banco de Talentos",
        "external_id": "COD124",
    },
    {
        "fullName": "Carlos Pereira",
        "email": "carlos.pereira@email.com",
        "phone": "(51) 3333-4444",
        "city": "Canoas/RS",
        "interestAreas": "Administrativo",
        "source": "Indicação",
        "referral": "Pedro Lima",
        "external_id": "COD125",
    },
]


def template_headers():
    return [f.csv_label for f in CANDIDATE_FIELDS]


def template_rows():
    """Example rows as lists of cells aligned with ``template_headers()``."""
    return [
        [example.get(f.key, "") for f in CANDIDATE_FIELDS]
        for example in EXAMPLE_ROWS
    ]


def build_template_csv() -> bytes:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL)
    writer.writerow(template_headers())
    writer.writerows(template_rows())

    # BOM so Excel opens accented labels correctly
    return buffer.getvalue().encode("utf-8-sig")


def build_template_xlsx() -> bytes:
    df = pd.DataFrame(template_rows(), columns=template_headers())

    buffer = io.BytesIO()
    df.to_excel(buffer, index=False, sheet_name=TEMPLATE_SHEET_NAME, engine="openpyxl")
    return buffer.getvalue()


def build_template(fmt="csv") -> bytes:
    fmt = (fmt or "csv").lower()
    if fmt == "csv":
        return build_template_csv()
    if fmt == "xlsx":
        return build_template_xlsx()
    raise ValueError(f"Unknown template format: {fmt}")


def template_filename(fmt="csv", today=None) -> str:
    today = today or date.today()
    return f"modelo_importacao_{today.isoformat()}.{fmt}"
