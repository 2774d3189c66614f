"""Rounds of the championship and score propagation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .models import Jogador, Usuario


@dataclass
class Rodada:
    """A numbered round of matches."""

    numero: int = 0

    def atualizar_pontuacoes(
        self, usuarios: Iterable[Usuario], jogadores_atualizados: Iterable[Jogador]
    ) -> None:
        """Copy fresh player scores onto every user's starters and recompute team totals."""
        pontos = {j.id: j.pontuacao for j in jogadores_atualizados}
        for usuario in usuarios:
            time = usuario.time_escalado
            for titular in time.titulares:
                if titular.id in pontos:
                    titular.pontuacao = pontos[titular.id]
            time.calcular_pontuacao()