"""The player transfer market."""

from __future__ import annotations

from dataclasses import dataclass, field

from .models import Jogador, _num


class ErroMercado(Exception):
    """Raised when a purchase or sale cannot be made."""


@dataclass
class Mercado:
    """Players on offer, with buying and selling against a balance."""

    jogadores_disponiveis: list[Jogador] = field(default_factory=list)

    def listar_jogadores(self) -> None:
        """Print the available players as a table."""
        print("ID\tNome\t\tPosição\t\tPreço")
        for j in self.jogadores_disponiveis:
            print(f"{j.id}\t{j.nome}\t{j.posicao}\t{_num(j.preco)}")

    def comprar_jogador(
        self, jogador_id: int, saldo: float, time: list[Jogador]
    ) -> float:
        """Append the player to ``time`` and return the balance left after paying."""
        jogador = next(
            (
                j
                for j in self.jogadores_disponiveis
                if j.id == jogador_id and saldo >= j.preco
            ),
            None,
        )
        if jogador is None:
            raise ErroMercado(
                f"cannot buy player {jogador_id}: unknown or balance too low"
            )
        time.append(jogador)
        return saldo - jogador.preco

    def vender_jogador(
        self, jogador_id: int, saldo: float, time: list[Jogador]
    ) -> float:
        """Remove the player from ``time`` and return the balance with its price added."""
        for pos, j in enumerate(time):
            if j.id == jogador_id:
                del time[pos]
                return saldo + j.preco
        raise ErroMercado(f"player {jogador_id} is not in the team")