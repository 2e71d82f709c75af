"""
Fixtures compartilhadas dos testes do Gestor de Safras.
"""

from datetime import date
from decimal import Decimal

import pytest
from django.core.management import call_command

from safras.models import Fazenda, Safra


@pytest.fixture
def fazenda(db):
    return Fazenda.objects.create(
        nome="Fazenda Boa Esperança",
        localizacao="Anitápolis, SC",
        produtor="João da Silva",
    )


@pytest.fixture
def safra_milho(fazenda):
    return Safra.objects.create(
        fazenda=fazenda,
        nome="Milho Verão 23/24",
        cultura="Milho",
        variedade="AG-7098",
        area=Decimal("50"),
        data_inicio=date(2023, 10, 15),
    )


@pytest.fixture
def safra_soja(fazenda):
    return Safra.objects.create(
        fazenda=fazenda,
        nome="Soja Safra 23/24",
        cultura="Soja",
        variedade="TMG-7062",
        area=Decimal("75"),
        data_inicio=date(2023, 11, 1),
    )


@pytest.fixture
def dados_iniciais(db):
    """Carrega a fixture de demonstração (3 safras, 2 custos fixos)."""
    call_command("loaddata", "dados_iniciais", verbosity=0)


@pytest.fixture
def usuario(django_user_model):
    return django_user_model.objects.create_user(username="gestor", password="senha-segura-123")


@pytest.fixture
def cliente_logado(client, usuario):
    client.force_login(usuario)
    return client
