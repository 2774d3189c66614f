"""Core domain objects: players, fantasy teams and users."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field

MAX_TITULARES = 11


def _num(valor: float) -> str:
    """Format a number the way a default stream would (6 significant digits)."""
    return f"{valor:g}"


@dataclass
class Pessoa(ABC):
    """Abstract base for anything with an identifier and a name."""

    id: int = 0
    nome: str = ""

    @abstractmethod
    def exibir_info(self) -> str:
        """Print a short description to standard output and return it."""


@dataclass
class Jogador(Pessoa):
    """A footballer that can be bought on the market and fielded."""

    posicao: str = ""
    preco: float = 0.0
    gols: int = 0
    assistencias: int = 0
    cartoes_amarelos: int = 0
    cartoes_vermelhos: int = 0
    pontuacao: float = 0.0

    def atualizar_estatisticas(
        self,
        gols: int,
        assistencias: int,
        amarelos: int,
        vermelhos: int,
        pontuacao: float,
    ) -> None:
        """Replace the match statistics and score of the player."""
        self.gols = gols
        self.assistencias = assistencias
        self.cartoes_amarelos = amarelos
        self.cartoes_vermelhos = vermelhos
        self.pontuacao = pontuacao

    def exibir_info(self) -> str:
        """Print the player's description and return the printed text."""
        texto = (
            f"Jogador: {self.nome} (ID: {self.id})\n"
            f"Posição: {self.posicao}, Preço: R${_num(self.preco)}, "
            f"Pontuação: {_num(self.pontuacao)}"
        )
        print(texto)
        return texto


@dataclass
class TimeEscalado:
    """A user's squad: players owned and the starting line-up."""

    id: int = 0
    nome: str = ""
    comprados: list[Jogador] = field(default_factory=list)
    titulares: list[Jogador] = field(default_factory=list)
    pontuacao_total: float = 0.0

    def _possui(self, jogador_id: int) -> bool:
        return any(j.id == jogador_id for j in self.comprados)

    def adicionar_jogador(self, jogador: Jogador) -> None:
        """Add a player to the owned list unless one with that id is already there."""
        if not self._possui(jogador.id):
            self.comprados.append(jogador)

    def remover_jogador(self, jogador_id: int) -> None:
        """Drop every player with the given id from both the owned list and the line-up."""
        self.comprados = [j for j in self.comprados if j.id != jogador_id]
        self.titulares = [j for j in self.titulares if j.id != jogador_id]

    def calcular_pontuacao(self) -> float:
        """Recompute the team score as the sum of the starters' scores."""
        self.pontuacao_total = sum(j.pontuacao for j in self.titulares)
        return self.pontuacao_total


@dataclass
class Usuario(Pessoa):
    """A player of the game, with a balance and a squad."""

    saldo: float = 100.0
    time_escalado: TimeEscalado = field(default_factory=TimeEscalado)

    def comprar_jogador(self, jogador: Jogador) -> bool:
        """Buy a player if the balance covers the price; return whether it was charged."""
        if self.saldo < jogador.preco:
            return False
        self.time_escalado.adicionar_jogador(jogador)
        self.saldo -= jogador.preco
        return True

    def vender_jogador(self, jogador_id: int) -> None:
        """Sell an owned player, crediting its price and removing it from the squad."""
        vendido = next(
            (j for j in self.time_escalado.comprados if j.id == jogador_id), None
        )
        if vendido is not None:
            self.saldo += vendido.preco
        self.time_escalado.remover_jogador(jogador_id)

    def escalar_time(self, jogadores_ids: Iterable[int]) -> list[Jogador]:
        """Set the starters from up to eleven ids; ids not owned are ignored."""
        ids = list(jogadores_ids)[:MAX_TITULARES]
        por_id: dict[int, Jogador] = {}
        for j in self.time_escalado.comprados:
            por_id.setdefault(j.id, j)
        titulares = [por_id[i] for i in ids if i in por_id]
        self.time_escalado.titulares = titulares
        return list(titulares)

    def exibir_info(self) -> str:
        """Print the user's description and return the printed text."""
        texto = (
            f"Usuário: {self.nome} (ID: {self.id})\n"
            f"Saldo: R${_num(self.saldo)}, Time: {self.time_escalado.nome}"
        )
        print(texto)
        return texto