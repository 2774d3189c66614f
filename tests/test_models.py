import pytest

from cartola.models import Jogador, Pessoa, TimeEscalado, Usuario


def _jogador(jid, preco=10.0, pontuacao=0.0):
    j = Jogador(jid, f"J{jid}", "ATA", preco)
    j.pontuacao = pontuacao
    return j


def test_pessoa_is_abstract():
    with pytest.raises(TypeError):
        Pessoa(1, "x")


def test_jogador_defaults():
    j = Jogador(7, "Zico", "MEI", 12.5)
    assert (j.id, j.nome, j.posicao, j.preco) == (7, "Zico", "MEI", 12.5)
    assert j.gols == 0 and j.assistencias == 0
    assert j.cartoes_amarelos == 0 and j.cartoes_vermelhos == 0
    assert j.pontuacao == 0


def test_atualizar_estatisticas():
    j = Jogador(1, "A", "ZAG", 5.0)
    j.atualizar_estatisticas(2, 1, 3, 1, 8.5)
    assert (j.gols, j.assistencias, j.cartoes_amarelos, j.cartoes_vermelhos) == (2, 1, 3, 1)
    assert j.pontuacao == 8.5


def test_jogador_exibir_info(capsys):
    j = Jogador(10, "Pele", "ATA", 15.0)
    j.pontuacao = 9.5
    j.exibir_info()
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Jogador: Pele (ID: 10)"
    assert out[1] == "Posição: ATA, Preço: R$15, Pontuação: 9.5"


def test_adicionar_jogador_ignores_duplicates():
    time = TimeEscalado(1, "T")
    time.adicionar_jogador(_jogador(1))
    time.adicionar_jogador(_jogador(1))
    time.adicionar_jogador(_jogador(2))
    assert [j.id for j in time.comprados] == [1, 2]


def test_remover_jogador_removes_from_both_lists():
    time = TimeEscalado(1, "T")
    for i in (1, 2, 3):
        time.adicionar_jogador(_jogador(i))
    time.titulares = [time.comprados[0], time.comprados[1]]
    time.remover_jogador(1)
    assert [j.id for j in time.comprados] == [2, 3]
    assert [j.id for j in time.titulares] == [2]


def test_calcular_pontuacao_sums_titulares_only():
    time = TimeEscalado(1, "T")
    a, b, c = _jogador(1, pontuacao=4.0), _jogador(2, pontuacao=2.5), _jogador(3, pontuacao=100.0)
    for j in (a, b, c):
        time.adicionar_jogador(j)
    time.titulares = [a, b]
    assert time.calcular_pontuacao() == a.pontuacao + b.pontuacao
    assert time.pontuacao_total == a.pontuacao + b.pontuacao


def test_calcular_pontuacao_empty_is_zero():
    time = TimeEscalado(1, "T")
    time.pontuacao_total = 5.0
    assert time.calcular_pontuacao() == 0


def test_usuario_default_balance():
    u = Usuario()
    assert u.saldo == 100.0
    assert u.time_escalado.comprados == []


def test_usuario_comprar_jogador():
    u = Usuario(1, "ana", 50.0, TimeEscalado(1, "ana FC"))
    j = _jogador(1, preco=20.0)
    assert u.comprar_jogador(j) is True
    assert u.saldo == 50.0 - j.preco
    assert [x.id for x in u.time_escalado.comprados] == [1]


def test_usuario_comprar_sem_saldo():
    u = Usuario(1, "ana", 5.0, TimeEscalado())
    assert u.comprar_jogador(_jogador(1, preco=20.0)) is False
    assert u.saldo == 5.0
    assert u.time_escalado.comprados == []


def test_usuario_vender_jogador_round_trip():
    u = Usuario(1, "ana", 50.0, TimeEscalado())
    u.comprar_jogador(_jogador(3, preco=20.0))
    u.vender_jogador(3)
    assert u.saldo == 50.0
    assert u.time_escalado.comprados == []


def test_usuario_vender_nao_possuido():
    u = Usuario(1, "ana", 50.0, TimeEscalado())
    u.vender_jogador(99)
    assert u.saldo == 50.0


def test_escalar_time_filters_and_limits():
    u = Usuario(1, "ana", 1000.0, TimeEscalado())
    for i in range(1, 14):
        u.comprar_jogador(_jogador(i, preco=1.0))
    titulares = u.escalar_time([99, *range(1, 14)])
    assert [j.id for j in titulares] == list(range(1, 11))
    assert [j.id for j in u.time_escalado.titulares] == list(range(1, 11))


def test_usuario_exibir_info(capsys):
    u = Usuario(2, "bia", 100.0, TimeEscalado(2, "bia FC"))
    u.exibir_info()
    out = capsys.readouterr().out.splitlines()
    assert out == ["Usuário: bia (ID: 2)", "Saldo: R$100, Time: bia FC"]