import pytest

from cartola.mercado import ErroMercado, Mercado
from cartola.models import Jogador


@pytest.fixture
def mercado():
    return Mercado([
        Jogador(1, "Ana", "GOL", 10.0),
        Jogador(2, "Bia", "ATA", 30.0),
    ])


def test_comprar_jogador(mercado):
    time = []
    saldo = mercado.comprar_jogador(2, 50.0, time)
    assert saldo == 50.0 - mercado.jogadores_disponiveis[1].preco
    assert [j.id for j in time] == [2]


def test_comprar_saldo_exato(mercado):
    time = []
    assert mercado.comprar_jogador(1, 10.0, time) == 0
    assert len(time) == 1


def test_comprar_saldo_insuficiente(mercado):
    time = []
    with pytest.raises(ErroMercado):
        mercado.comprar_jogador(2, 5.0, time)
    assert time == []


def test_comprar_inexistente(mercado):
    with pytest.raises(ErroMercado):
        mercado.comprar_jogador(42, 1000.0, [])


def test_compra_e_venda_round_trip(mercado):
    time = []
    saldo = mercado.comprar_jogador(1, 50.0, time)
    saldo = mercado.vender_jogador(1, saldo, time)
    assert saldo == 50.0
    assert time == []


def test_vender_nao_possuido(mercado):
    time = [mercado.jogadores_disponiveis[0]]
    with pytest.raises(ErroMercado):
        mercado.vender_jogador(2, 0.0, time)
    assert [j.id for j in time] == [1]


def test_listar_jogadores(mercado, capsys):
    mercado.listar_jogadores()
    linhas = capsys.readouterr().out.splitlines()
    assert linhas[0] == "ID\tNome\t\tPosição\t\tPreço"
    assert linhas[1] == "1\tAna\tGOL\t10"
    assert len(linhas) == 3