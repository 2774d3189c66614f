"""Interactive text menu for the fantasy football game."""

from __future__ import annotations

import argparse
import copy
import os
import re
import sys
from collections.abc import Iterable
from typing import IO, Optional

from . import storage
from .mercado import ErroMercado, Mercado
from .models import TimeEscalado, Usuario, _num
from .rodada import Rodada

_PALAVRA = re.compile(r"\S+")


class _Entrada:
    """Whitespace-separated word and line reader over a text stream."""

    def __init__(self, fluxo: IO[str]) -> None:
        self._fluxo = fluxo
        self._buf = ""

    def _encher(self) -> bool:
        linha = self._fluxo.readline()
        if not linha:
            return False
        self._buf += linha
        return True

    def palavra(self) -> str:
        while True:
            self._buf = self._buf.lstrip()
            if self._buf:
                break
            if not self._encher():
                raise EOFError
        texto = _PALAVRA.match(self._buf).group()
        self._buf = self._buf[len(texto):]
        return texto

    def inteiro(self) -> Optional[int]:
        """Next word as an int, or None when it is not a number."""
        try:
            return int(self.palavra())
        except ValueError:
            return None

    def ignorar(self) -> None:
        if not self._buf and not self._encher():
            return
        self._buf = self._buf[1:]

    def fim_de_linha(self) -> bool:
        return self._buf.startswith(("\n", "\r\n"))

    def descartar_linha(self) -> None:
        fim = self._buf.find("\n")
        self._buf = "" if fim < 0 else self._buf[fim + 1:]

    def linha(self) -> str:
        if not self._buf and not self._encher():
            raise EOFError
        fim = self._buf.find("\n")
        if fim < 0:
            texto, self._buf = self._buf, ""
        else:
            texto, self._buf = self._buf[:fim], self._buf[fim + 1:]
        return texto.rstrip("\r")


def ranking(usuarios: Iterable[Usuario]) -> list[tuple[str, float]]:
    """Return (name, team score) pairs, highest score first."""
    return sorted(
        ((u.nome, u.time_escalado.pontuacao_total) for u in usuarios),
        key=lambda par: par[1],
        reverse=True,
    )


class App:
    """The game session: loaded data, the logged-in user and the menus."""

    SALDO_INICIAL = 100.0

    def __init__(
        self,
        data_dir: str = "data",
        entrada: Optional[IO[str]] = None,
        saida: Optional[IO[str]] = None,
    ) -> None:
        self.data_dir = data_dir
        self._entrada = _Entrada(entrada if entrada is not None else sys.stdin)
        self._saida = saida if saida is not None else sys.stdout
        self.usuarios: list[Usuario] = storage.carregar_usuarios(
            self._caminho("usuarios.json")
        )
        self.jogadores = storage.carregar_jogadores(self._caminho("jogadores.json"))
        self.rodadas: list[Rodada] = storage.carregar_rodadas(
            self._caminho("rodadas.json")
        )
        self.mercado = Mercado(copy.deepcopy(self.jogadores))
        self.logado: Optional[Usuario] = None

    def _caminho(self, nome: str) -> str:
        return os.path.join(self.data_dir, nome)

    def _print(self, *partes: object, end: str = "\n") -> None:
        print(*partes, end=end, file=self._saida)

    def _salvar_usuarios(self) -> None:
        storage.salvar_usuarios(self._caminho("usuarios.json"), self.usuarios)

    def run(self) -> None:
        """Run the menu loop until the user quits or input ends."""
        try:
            while self._passo():
                pass
        except EOFError:
            pass

    def _passo(self) -> bool:
        if self.logado is None:
            return self._menu_login()
        return self._menu_usuario(self.logado)

    def _menu_login(self) -> bool:
        self._print("\n==== Cartola FC CIn Edition ====")
        self._print("1. Login/Cadastro")
        self._print("0. Sair")
        self._print("Escolha uma opção: ", end="")
        opcao = self._entrada.inteiro()
        self._entrada.ignorar()
        if opcao == 1:
            self._print("Digite seu nome de usuário: ", end="")
            self._login(self._entrada.linha())
        elif opcao == 0:
            self._print("Saindo...")
            return False
        else:
            self._print("Opção inválida!")
        return True

    def _login(self, nome: str) -> None:
        existente = next((u for u in self.usuarios if u.nome == nome), None)
        if existente is not None:
            self.logado = existente
            self._print(f"Bem-vindo de volta, {nome}!")
            return
        novo_id = len(self.usuarios) + 1
        novo = Usuario(
            id=novo_id,
            nome=nome,
            saldo=self.SALDO_INICIAL,
            time_escalado=TimeEscalado(novo_id, f"{nome} FC"),
        )
        self.usuarios.append(novo)
        self.logado = novo
        self._print(f"Usuário cadastrado com sucesso! Bem-vindo, {nome}!")
        self._salvar_usuarios()

    def _menu_usuario(self, usuario: Usuario) -> bool:
        time = usuario.time_escalado
        self._print("\n==== Cartola FC CIn Edition ====")
        self._print(f"Usuário: {usuario.nome} | Saldo: {_num(usuario.saldo)}")
        self._print(f"Time: {time.nome}")
        self._print(f"Pontuação total: {_num(time.pontuacao_total)}")
        self._print("1. Mercado de Jogadores")
        self._print("2. Escalar Time")
        self._print("3. Iniciar Rodada")
        self._print("4. Exibir Ranking")
        self._print("5. Logout")
        self._print("0. Sair")
        self._print("Escolha uma opção: ", end="")
        opcao = self._entrada.inteiro()
        self._entrada.ignorar()
        if opcao == 1:
            self._menu_mercado(usuario)
            self._salvar_usuarios()
        elif opcao == 2:
            self._menu_escalacao(usuario)
        elif opcao == 3:
            self._iniciar_rodada(usuario)
            self._salvar_usuarios()
        elif opcao == 4:
            self._exibir_ranking()
        elif opcao == 5:
            self.logado = None
            self._print("Logout realizado.")
        elif opcao == 0:
            self._print("Saindo...")
            return False
        else:
            self._print("Opção inválida!")
        return True

    def _menu_mercado(self, usuario: Usuario) -> None:
        time = usuario.time_escalado
        while True:
            self._print(f"\nSeu saldo: {_num(usuario.saldo)}")
            self._print("Jogadores disponíveis para compra:")
            ids_comprados = {j.id for j in time.comprados}
            disponiveis = [
                j for j in self.mercado.jogadores_disponiveis if j.id not in ids_comprados
            ]
            for j in disponiveis:
                self._print(f"{j.id}\t{j.nome}\t{j.posicao}\tR${_num(j.preco)}")
            if not disponiveis:
                self._print("Nenhum jogador disponível para compra.")
            self._print("1. Comprar jogador\n2. Vender jogador\n0. Voltar\nEscolha: ", end="")
            escolha = self._entrada.inteiro()
            if escolha == 1:
                self._print("Digite o ID do jogador para comprar: ", end="")
                self._comprar(usuario, self._entrada.inteiro(), ids_comprados)
            elif escolha == 2:
                self._print("Digite o ID do jogador para vender: ", end="")
                self._vender(usuario, self._entrada.inteiro())
            elif escolha == 0:
                return

    def _comprar(
        self, usuario: Usuario, jogador_id: Optional[int], ids_comprados: set[int]
    ) -> None:
        if jogador_id in ids_comprados:
            self._print("Você já possui esse jogador.")
            return
        try:
            usuario.saldo = self.mercado.comprar_jogador(jogador_id, usuario.saldo, [])
        except ErroMercado:
            self._print(
                "Não foi possível comprar (saldo insuficiente ou jogador não existe)."
            )
            return
        jogador = next(j for j in self.mercado.jogadores_disponiveis if j.id == jogador_id)
        usuario.time_escalado.adicionar_jogador(copy.deepcopy(jogador))
        self._print("Jogador comprado!")

    def _vender(self, usuario: Usuario, jogador_id: Optional[int]) -> None:
        usuario.time_escalado.remover_jogador(jogador_id)
        jogador = next(
            (j for j in self.mercado.jogadores_disponiveis if j.id == jogador_id), None
        )
        if jogador is None:
            self._print("Jogador não está no seu time.")
            return
        usuario.saldo += jogador.preco
        self._print("Jogador vendido!")

    def _menu_escalacao(self, usuario: Usuario) -> None:
        comprados = usuario.time_escalado.comprados
        if not comprados:
            self._print("\nVocê não possui jogadores comprados para escalar.")
            return
        self._print("\nSeus jogadores comprados:")
        for j in comprados:
            self._print(f"{j.id}: {j.nome} ({j.posicao}) - R${_num(j.preco)}")
        self._print(
            "Digite os IDs dos jogadores que deseja escalar como titulares "
            "(até 11, separados por espaço): ",
            end="",
        )
        ids: list[int] = []
        while len(ids) < 11:
            jogador_id = self._entrada.inteiro()
            if jogador_id is None:
                break
            ids.append(jogador_id)
            if self._entrada.fim_de_linha():
                break
        self._entrada.descartar_linha()
        titulares = usuario.escalar_time(ids)
        self._print("\nTitulares escalados:")
        for j in titulares:
            self._print(f"{j.id}: {j.nome} ({j.posicao})")

    def _iniciar_rodada(self, usuario: Usuario) -> None:
        Rodada().atualizar_pontuacoes([usuario], self.jogadores)
        self._print(
            "\nPontuação do seu time nesta rodada: "
            f"{_num(usuario.time_escalado.pontuacao_total)}"
        )

    def _exibir_ranking(self) -> None:
        self._print("\n==== Ranking dos Times ====")
        for pos, (nome, pontos) in enumerate(ranking(self.usuarios), start=1):
            self._print(f"{pos}. {nome} - {_num(pontos)} pontos")


def main(argv: Optional[list[str]] = None) -> int:
    """Start the interactive game."""
    parser = argparse.ArgumentParser(prog="cartola", description="Fantasy football game.")
    parser.add_argument(
        "--data-dir", default="data", help="directory holding the JSON data files"
    )
    args = parser.parse_args(argv)
    App(args.data_dir).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())