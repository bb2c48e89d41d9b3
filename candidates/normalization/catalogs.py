# Canonical label -> known variants (lowercase).
# Dicts keep declaration order; earlier entries win ambiguous matches.

MAIN_CITIES = {
    "Porto Alegre/RS": [
        "porto alegre", "porto alegre/rs", "poa", "poa/rs", "portoalegre",
        "porto alegre rs", "p. alegre", "p. alegre/rs",
    ],
    "Canoas/RS": [
        "canoas", "canoas/rs", "canoas rs",
    ],
    "Bagé/RS": [
        "bagé", "bage", "bagé/rs", "bage/rs", "bagé rs", "bage rs",
    ],
    "Santo Antônio da Patrulha/RS": [
        "santo antônio da patrulha", "santo antonio da patrulha",
        "sto antônio da patrulha", "sto antonio da patrulha",
        "santo ant patrulha", "sto ant patrulha",
        "sap", "sap/rs", "sap rs",
        "santo antônio da patrulha/rs", "santo antonio da patrulha/rs",
        "sto antônio da patrulha/rs", "sto antonio da patrulha/rs",
        "santo ant patrulha/rs", "sto ant patrulha/rs",
    ],
    "Guaíba/RS": [
        "guaíba", "guaiba", "guaíba/rs", "guaiba/rs", "guaíba rs", "guaiba rs",
    ],
    "Osório/RS": [
        "osório", "osorio", "osório/rs", "osorio/rs", "osório rs", "osorio rs",
    ],
    "Tramandaí/RS": [
        "tramandaí", "tramandai", "tramandaí/rs", "tramandai/rs",
        "tramandaí rs", "tramandai rs",
    ],
    "São Borja/RS": [
        "são borja", "sao borja", "são borja/rs", "sao borja/rs",
        "são borja rs", "sao borja rs", "s borja", "s borja/rs",
    ],
    "Sant'Ana do Livramento/RS": [
        "sant'ana do livramento", "santana do livramento",
        "sant'ana do livramento/rs", "santana do livramento/rs",
        "sant'ana do livramento rs", "santana do livramento rs",
        "sant ana do livramento", "sant ana do livramento/rs",
        "livramento", "livramento/rs", "livramento rs",
    ],
    "Cruz Alta/RS": [
        "cruz alta", "cruz alta/rs", "cruz alta rs", "cruzalta", "cruzalta/rs",
    ],
    "Itaqui/RS": [
        "itaqui", "itaqui/rs", "itaqui rs",
    ],
    "Alegrete/RS": [
        "alegrete", "alegrete/rs", "alegrete rs",
    ],
    "Arroio do Sal/RS": [
        "arroio do sal", "arroio do sal/rs", "arroio do sal rs",
        "arroio sal", "arroio sal/rs", "arroio sal rs",
    ],
    "Torres/RS": [
        "torres", "torres/rs", "torres rs",
    ],
}


MAIN_SOURCES = {
    "Facebook": [
        "facebook", "fb", "face", "facebook.com", "fb.com",
        "facebook ads", "anúncio facebook", "anuncio facebook",
        "facebook marketing", "meta", "meta ads",
    ],
    "Instagram": [
        "instagram", "ig", "insta", "instagram.com",
        "instagram ads", "anúncio instagram", "anuncio instagram",
        "stories instagram", "post instagram", "reels instagram",
    ],
    "Google": [
        "google", "google.com", "google ads", "google adwords",
        "anúncio google", "anuncio google", "busca google",
        "pesquisa google", "google search", "google busca",
        "ads google", "adwords",
    ],
    "Agência de Empregos": [
        "agência de empregos", "agencia de empregos",
        "agência empregos", "agencia empregos",
        "agência", "agencia", "agência trabalho", "agencia trabalho",
        "empregos", "vagas", "site de empregos", "portal de empregos",
        "indeed", "linkedin jobs", "catho", "infojobs", "vagas.com",
    ],
    "Site da Empresa": [
        "site da empresa", "site empresa", "site", "website",
        "site young", "young empreendimentos", "young",
        "site oficial", "site corporativo", "página da empresa",
        "pagina da empresa", "web site", "www",
    ],
    "LinkedIn": [
        "linkedin", "linkedin.com", "linked in",
        "linkedin jobs", "vagas linkedin", "post linkedin",
        "anúncio linkedin", "anuncio linkedin",
    ],
    "Indicação": [
        "indicação", "indicacao", "indicado", "foi indicado",
        "amigo indicou", "conhecido indicou", "colega indicou",
        "referência", "referencia", "referido", "indicação de amigo",
        "indicacao de amigo", "indicação de colega", "indicacao de colega",
    ],
    "WhatsApp": [
        "whatsapp", "whats app", "wa", "zap", "zap zap",
        "grupo whatsapp", "grupo zap", "mensagem whatsapp",
        "mensagem zap",
    ],
    "Email": [
        "email", "e-mail", "correio eletrônico", "correio eletronico",
        "newsletter", "mailing", "campanha email", "campanha e-mail",
    ],
    "Evento": [
        "evento", "feira", "feira de empregos", "feira de trabalho",
        "workshop", "palestra", "seminário", "seminario",
        "job fair", "feira de recrutamento",
    ],
    "Jornal": [
        "jornal", "jornal impresso", "jornal local", "jornal regional",
        "classificados", "anúncio jornal", "anuncio jornal",
    ],
    "Rádio": [
        "rádio", "radio", "rádio local", "radio local",
        "anúncio rádio", "anuncio radio", "comercial rádio",
        "comercial radio",
    ],
    "TV": [
        "tv", "televisão", "televisao", "tv local", "canal",
        "anúncio tv", "anuncio tv", "comercial tv", "propaganda tv",
    ],
    "Outros": [
        "outros", "outro", "diversos", "outra fonte",
        "não informado", "nao informado", "não sabe", "nao sabe",
    ],
}


MAIN_INTEREST_AREAS = {
    "Arquitetura": [
        "arquitetura", "arquiteto", "arquitetura e urbanismo",
        "arquitetura urbanismo", "projeto arquitetônico",
        "desenho arquitetônico", "arquitetura de interiores",
        "arquitetura interiores",
    ],
    "Engenharia": [
        "engenharia", "engenheiro", "engenharia civil",
        "engenharia de obras", "engenharia obras",
        "engenharia estrutural", "engenharia de projetos",
        "engenharia projetos", "eng civil", "eng. civil",
    ],
    "Marketing": [
        "marketing", "mkt", "mkt digital", "marketing digital",
        "marketing de conteúdo", "marketing de conteudo",
        "marketing de produtos", "marketing produtos",
        "publicidade", "propaganda", "comunicação", "comunicacao",
        "branding", "marca", "brand",
    ],
    "Comercial": [
        "comercial", "vendas", "vendedor", "representante comercial",
        "representante", "vendas externas", "vendas internas",
        "atendimento comercial", "atendimento", "atendente",
        "consultor comercial", "consultor de vendas", "consultor vendas",
    ],
    "Estágio": [
        "estágio", "estagio", "estagiário", "estagiario",
        "estágio técnico", "estagio tecnico", "estágio administrativo",
        "estagio administrativo", "trainee", "jovem aprendiz",
        "aprendiz", "estágio remunerado", "estagio remunerado",
    ],
    "Administrativa": [
        "administrativa", "administração", "administracao",
        "administrativo", "assistente administrativo",
        "auxiliar administrativo", "secretária", "secretaria",
        "recepcionista", "atendimento administrativo",
        "gestão administrativa", "gestao administrativa",
    ],
    "Novos Negócios": [
        "novos negócios", "novos negocios",
        "desenvolvimento de negócios", "desenvolvimento de negocios",
        "business development", "bd", "novos projetos",
        "expansão", "expansao", "crescimento", "inovação",
        "inovacao", "startup", "empreendedorismo",
    ],
    "Obras": [
        "obras", "construção", "construcao", "construção civil",
        "construcao civil", "execução de obras", "execucao de obras",
        "gerência de obras", "gerencia de obras", "gerenciamento de obras",
        "fiscalização de obras", "fiscalizacao de obras", "fiscal de obras",
        "supervisão de obras", "supervisao de obras", "supervisor de obras",
    ],
    "Projetos": [
        "projetos", "projeto", "gestão de projetos", "gestao de projetos",
        "gerência de projetos", "gerencia de projetos", "gerenciamento de projetos",
        "coordenador de projetos", "coordenador projetos",
        "analista de projetos", "analista projetos", "project manager",
        "pm", "pmo", "escritório de projetos", "escritorio de projetos",
    ],
    "Financeiro": [
        "financeiro", "finanças", "financas", "contabilidade",
        "contador", "analista financeiro",
        "assistente financeiro", "auxiliar financeiro",
        "controladoria", "tesouraria", "fiscal", "fiscalização",
        "fiscalizacao", "auditoria", "auditor",
    ],
    "Tecnologia": [
        "tecnologia", "ti", "t.i.", "tecnologia da informação",
        "tecnologia da informacao", "informática", "informatica",
        "desenvolvimento", "dev", "programação", "programacao",
        "programador", "desenvolvedor", "analista de sistemas",
        "analista sistemas", "suporte técnico", "suporte tecnico",
        "infraestrutura", "infra", "dados", "data",
        "ciência de dados", "ciencia de dados", "data science",
    ],
    "Recursos Humanos": [
        "recursos humanos", "rh", "r.h.", "gestão de pessoas",
        "gestao de pessoas", "gp", "recrutamento", "seleção",
        "selecao", "recrutamento e seleção", "recrutamento e selecao",
        "r&s", "r e s", "dp", "departamento pessoal",
        "benefícios", "beneficios", "folha de pagamento", "folha pagamento",
    ],
    "Logística": [
        "logística", "logistica", "logística e distribuição",
        "logistica e distribuicao", "almoxarifado", "estoque",
        "armazenagem", "distribuição", "distribuicao",
        "supply chain", "cadeia de suprimentos", "cadeia suprimentos",
        "compras", "compras e suprimentos", "compras suprimentos",
    ],
    "Qualidade": [
        "qualidade", "controle de qualidade", "controle qualidade",
        "qc", "qa", "assurance", "gestão da qualidade",
        "gestao da qualidade", "iso", "certificação", "certificacao",
        "auditoria de qualidade", "auditoria qualidade",
    ],
    "Segurança do Trabalho": [
        "segurança do trabalho", "seguranca do trabalho",
        "segurança", "seguranca", "sst", "sesmt", "técnico em segurança",
        "tecnico em seguranca", "engenharia de segurança",
        "engenharia de seguranca", "prevenção de acidentes",
        "prevencao de acidentes", "nr", "normas regulamentadoras",
    ],
    "Meio Ambiente": [
        "meio ambiente", "ambiental", "sustentabilidade",
        "gestão ambiental", "gestao ambiental", "licenciamento ambiental",
        "licenciamento", "ambientalista", "engenharia ambiental",
        "eng ambiental",
    ],
}


CATALOGS = {
    "city": MAIN_CITIES,
    "source": MAIN_SOURCES,
    "interest_area": MAIN_INTEREST_AREAS,
}
