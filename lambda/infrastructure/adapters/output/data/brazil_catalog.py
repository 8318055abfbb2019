"""
Catálogo estático: estados, capitais e estações INMET monitoradas
"""

BRAZILIAN_STATES = {
    'AC': {'name': 'Acre', 'region': 'Norte', 'capital': 'Rio Branco'},
    'AL': {'name': 'Alagoas', 'region': 'Nordeste', 'capital': 'Maceió'},
    'AP': {'name': 'Amapá', 'region': 'Norte', 'capital': 'Macapá'},
    'AM': {'name': 'Amazonas', 'region': 'Norte', 'capital': 'Manaus'},
    'BA': {'name': 'Bahia', 'region': 'Nordeste', 'capital': 'Salvador'},
    'CE': {'name': 'Ceará', 'region': 'Nordeste', 'capital': 'Fortaleza'},
    'DF': {'name': 'Distrito Federal', 'region': 'Centro-Oeste', 'capital': 'Brasília'},
    'ES': {'name': 'Espírito Santo', 'region': 'Sudeste', 'capital': 'Vitória'},
    'GO': {'name': 'Goiás', 'region': 'Centro-Oeste', 'capital': 'Goiânia'},
    'MA': {'name': 'Maranhão', 'region': 'Nordeste', 'capital': 'São Luís'},
    'MT': {'name': 'Mato Grosso', 'region': 'Centro-Oeste', 'capital': 'Cuiabá'},
    'MS': {'name': 'Mato Grosso do Sul', 'region': 'Centro-Oeste', 'capital': 'Campo Grande'},
    'MG': {'name': 'Minas Gerais', 'region': 'Sudeste', 'capital': 'Belo Horizonte'},
    'PA': {'name': 'Pará', 'region': 'Norte', 'capital': 'Belém'},
    'PB': {'name': 'Paraíba', 'region': 'Nordeste', 'capital': 'João Pessoa'},
    'PR': {'name': 'Paraná', 'region': 'Sul', 'capital': 'Curitiba'},
    'PE': {'name': 'Pernambuco', 'region': 'Nordeste', 'capital': 'Recife'},
    'PI': {'name': 'Piauí', 'region': 'Nordeste', 'capital': 'Teresina'},
    'RJ': {'name': 'Rio de Janeiro', 'region': 'Sudeste', 'capital': 'Rio de Janeiro'},
    'RN': {'name': 'Rio Grande do Norte', 'region': 'Nordeste', 'capital': 'Natal'},
    'RS': {'name': 'Rio Grande do Sul', 'region': 'Sul', 'capital': 'Porto Alegre'},
    'RO': {'name': 'Rondônia', 'region': 'Norte', 'capital': 'Porto Velho'},
    'RR': {'name': 'Roraima', 'region': 'Norte', 'capital': 'Boa Vista'},
    'SC': {'name': 'Santa Catarina', 'region': 'Sul', 'capital': 'Florianópolis'},
    'SP': {'name': 'São Paulo', 'region': 'Sudeste', 'capital': 'São Paulo'},
    'SE': {'name': 'Sergipe', 'region': 'Nordeste', 'capital': 'Aracaju'},
    'TO': {'name': 'Tocantins', 'region': 'Norte', 'capital': 'Palmas'},
}

BRAZILIAN_CAPITALS = {
    'rio-branco': {'name': 'Rio Branco', 'state_code': 'AC', 'latitude': -9.9747, 'longitude': -67.8100, 'stations': ['A104']},
    'maceio': {'name': 'Maceió', 'state_code': 'AL', 'latitude': -9.6658, 'longitude': -35.7350, 'stations': ['A303']},
    'macapa': {'name': 'Macapá', 'state_code': 'AP', 'latitude': 0.0349, 'longitude': -51.0694, 'stations': ['A202']},
    'manaus': {'name': 'Manaus', 'state_code': 'AM', 'latitude': -3.1190, 'longitude': -60.0217, 'stations': ['A101']},
    'salvador': {'name': 'Salvador', 'state_code': 'BA', 'latitude': -12.9714, 'longitude': -38.5014, 'stations': ['A401']},
    'fortaleza': {'name': 'Fortaleza', 'state_code': 'CE', 'latitude': -3.7319, 'longitude': -38.5267, 'stations': ['A305']},
    'brasilia': {'name': 'Brasília', 'state_code': 'DF', 'latitude': -15.7939, 'longitude': -47.8828, 'stations': ['A001']},
    'vitoria': {'name': 'Vitória', 'state_code': 'ES', 'latitude': -20.3155, 'longitude': -40.3128, 'stations': ['A612']},
    'goiania': {'name': 'Goiânia', 'state_code': 'GO', 'latitude': -16.6869, 'longitude': -49.2648, 'stations': ['A002']},
    'sao-luis': {'name': 'São Luís', 'state_code': 'MA', 'latitude': -2.5307, 'longitude': -44.3068, 'stations': ['A203']},
    'cuiaba': {'name': 'Cuiabá', 'state_code': 'MT', 'latitude': -15.6014, 'longitude': -56.0979, 'stations': ['A901']},
    'campo-grande': {'name': 'Campo Grande', 'state_code': 'MS', 'latitude': -20.4697, 'longitude': -54.6201, 'stations': ['A702']},
    'belo-horizonte': {'name': 'Belo Horizonte', 'state_code': 'MG', 'latitude': -19.9167, 'longitude': -43.9345, 'stations': ['A521']},
    'belem': {'name': 'Belém', 'state_code': 'PA', 'latitude': -1.4558, 'longitude': -48.4902, 'stations': ['A201']},
    'joao-pessoa': {'name': 'João Pessoa', 'state_code': 'PB', 'latitude': -7.1195, 'longitude': -34.8450, 'stations': ['A320']},
    'curitiba': {'name': 'Curitiba', 'state_code': 'PR', 'latitude': -25.4284, 'longitude': -49.2733, 'stations': ['A807']},
    'recife': {'name': 'Recife', 'state_code': 'PE', 'latitude': -8.0476, 'longitude': -34.8770, 'stations': ['A301']},
    'teresina': {'name': 'Teresina', 'state_code': 'PI', 'latitude': -5.0892, 'longitude': -42.8019, 'stations': ['A312']},
    'rio-de-janeiro': {'name': 'Rio de Janeiro', 'state_code': 'RJ', 'latitude': -22.9068, 'longitude': -43.1729, 'stations': ['A652', 'A621']},
    'natal': {'name': 'Natal', 'state_code': 'RN', 'latitude': -5.7945, 'longitude': -35.2110, 'stations': ['A304']},
    'porto-alegre': {'name': 'Porto Alegre', 'state_code': 'RS', 'latitude': -30.0346, 'longitude': -51.2177, 'stations': ['A801']},
    'porto-velho': {'name': 'Porto Velho', 'state_code': 'RO', 'latitude': -8.7612, 'longitude': -63.9004, 'stations': ['A103']},
    'boa-vista': {'name': 'Boa Vista', 'state_code': 'RR', 'latitude': 2.8235, 'longitude': -60.6758, 'stations': ['A135']},
    'florianopolis': {'name': 'Florianópolis', 'state_code': 'SC', 'latitude': -27.5954, 'longitude': -48.5480, 'stations': ['A806']},
    'sao-paulo': {'name': 'São Paulo', 'state_code': 'SP', 'latitude': -23.5505, 'longitude': -46.6333, 'stations': ['A701', 'A713']},
    'aracaju': {'name': 'Aracaju', 'state_code': 'SE', 'latitude': -10.9472, 'longitude': -37.0731, 'stations': ['A409']},
    'palmas': {'name': 'Palmas', 'state_code': 'TO', 'latitude': -10.1840, 'longitude': -48.3336, 'stations': ['A009']},
}

# Estações monitoradas: código -> metadados (coordenadas aproximadas da estação)
MONITORED_STATIONS = {
    # Norte
    'A104': {'name': 'Rio Branco', 'city': 'Rio Branco', 'state': 'AC', 'latitude': -9.9579, 'longitude': -67.8687},
    'A101': {'name': 'Manaus', 'city': 'Manaus', 'state': 'AM', 'latitude': -3.1036, 'longitude': -60.0155},
    'A202': {'name': 'Macapá', 'city': 'Macapá', 'state': 'AP', 'latitude': -0.0350, 'longitude': -51.0889},
    'A201': {'name': 'Belém', 'city': 'Belém', 'state': 'PA', 'latitude': -1.4111, 'longitude': -48.4394},
    'A103': {'name': 'Porto Velho', 'city': 'Porto Velho', 'state': 'RO', 'latitude': -8.7936, 'longitude': -63.8458},
    'A135': {'name': 'Boa Vista', 'city': 'Boa Vista', 'state': 'RR', 'latitude': 2.8200, 'longitude': -60.6600},
    'A009': {'name': 'Palmas', 'city': 'Palmas', 'state': 'TO', 'latitude': -10.1908, 'longitude': -48.3019},

    # Nordeste
    'A303': {'name': 'Maceió', 'city': 'Maceió', 'state': 'AL', 'latitude': -9.5511, 'longitude': -35.7702},
    'A401': {'name': 'Salvador', 'city': 'Salvador', 'state': 'BA', 'latitude': -13.0055, 'longitude': -38.5058},
    'A305': {'name': 'Fortaleza', 'city': 'Fortaleza', 'state': 'CE', 'latitude': -3.8158, 'longitude': -38.5378},
    'A203': {'name': 'São Luís', 'city': 'São Luís', 'state': 'MA', 'latitude': -2.5263, 'longitude': -44.2134},
    'A320': {'name': 'João Pessoa', 'city': 'João Pessoa', 'state': 'PB', 'latitude': -7.1652, 'longitude': -34.8156},
    'A301': {'name': 'Recife', 'city': 'Recife', 'state': 'PE', 'latitude': -8.0592, 'longitude': -34.9592},
    'A312': {'name': 'Teresina', 'city': 'Teresina', 'state': 'PI', 'latitude': -5.0347, 'longitude': -42.8013},
    'A304': {'name': 'Natal', 'city': 'Natal', 'state': 'RN', 'latitude': -5.8372, 'longitude': -35.2081},
    'A409': {'name': 'Aracaju', 'city': 'Aracaju', 'state': 'SE', 'latitude': -10.9525, 'longitude': -37.0544},

    # Centro-Oeste
    'A001': {'name': 'Brasília', 'city': 'Brasília', 'state': 'DF', 'latitude': -15.7893, 'longitude': -47.9258},
    'A002': {'name': 'Goiânia', 'city': 'Goiânia', 'state': 'GO', 'latitude': -16.6428, 'longitude': -49.2203},
    'A901': {'name': 'Cuiabá', 'city': 'Cuiabá', 'state': 'MT', 'latitude': -15.5590, 'longitude': -56.0626},
    'A702': {'name': 'Campo Grande', 'city': 'Campo Grande', 'state': 'MS', 'latitude': -20.4472, 'longitude': -54.7225},

    # Sudeste
    'A612': {'name': 'Vitória', 'city': 'Vitória', 'state': 'ES', 'latitude': -20.3155, 'longitude': -40.3172},
    'A521': {'name': 'Belo Horizonte - Pampulha', 'city': 'Belo Horizonte', 'state': 'MG', 'latitude': -19.8839, 'longitude': -43.9694},
    'A652': {'name': 'Rio de Janeiro - Forte de Copacabana', 'city': 'Rio de Janeiro', 'state': 'RJ', 'latitude': -22.9883, 'longitude': -43.1903},
    'A621': {'name': 'Rio de Janeiro - Vila Militar', 'city': 'Rio de Janeiro', 'state': 'RJ', 'latitude': -22.8612, 'longitude': -43.4114},
    'A701': {'name': 'São Paulo - Mirante de Santana', 'city': 'São Paulo', 'state': 'SP', 'latitude': -23.4963, 'longitude': -46.6200},
    'A713': {'name': 'São Paulo - Interlagos', 'city': 'São Paulo', 'state': 'SP', 'latitude': -23.7245, 'longitude': -46.6775},

    # Sul
    'A807': {'name': 'Curitiba', 'city': 'Curitiba', 'state': 'PR', 'latitude': -25.4486, 'longitude': -49.2306},
    'A801': {'name': 'Porto Alegre', 'city': 'Porto Alegre', 'state': 'RS', 'latitude': -30.0536, 'longitude': -51.1747},
    'A806': {'name': 'Florianópolis', 'city': 'Florianópolis', 'state': 'SC', 'latitude': -27.6025, 'longitude': -48.6200},
}
