"""JSON persistence for players, users and rounds."""

from __future__ import annotations

import json
import os
from collections.abc import Iterable
from typing import Any, Union

from .models import Jogador, TimeEscalado, Usuario
from .rodada import Rodada

PathLike = Union[str, "os.PathLike[str]"]


def _ler(filename: PathLike) -> list[Any]:
    """Return the decoded JSON array in ``filename``, or an empty list if it cannot be opened."""
    try:
        with open(filename, encoding="utf-8") as arquivo:
            return json.load(arquivo)
    except FileNotFoundError:
        return []
    except IsADirectoryError:
        return []
    except PermissionError:
        return []


def _gravar(filename: PathLike, data: list[dict[str, Any]]) -> None:
    with open(filename, "w", encoding="utf-8") as arquivo:
        json.dump(data, arquivo, indent=4, ensure_ascii=False)


def carregar_jogadores(filename: PathLike) -> list[Jogador]:
    """Load the player list with all statistics; a missing file gives an empty list."""
    return [
        Jogador(
            id=item["id"],
            nome=item["nome"],
            posicao=item["posicao"],
            preco=float(item["preco"]),
            gols=item["gols"],
            assistencias=item["assistencias"],
            cartoes_amarelos=item["cartoes_amarelos"],
            cartoes_vermelhos=item["cartoes_vermelhos"],
            pontuacao=float(item["pontuacao"]),
        )
        for item in _ler(filename)
    ]


def salvar_usuarios(filename: PathLike, usuarios: Iterable[Usuario]) -> None:
    """Write each user's id, name and balance."""
    _gravar(
        filename,
        [{"id": u.id, "nome": u.nome, "saldo": u.saldo} for u in usuarios],
    )


def carregar_usuarios(filename: PathLike) -> list[Usuario]:
    """Load users with an empty squad each; a missing file gives an empty list."""
    return [
        Usuario(
            id=item["id"],
            nome=item["nome"],
            saldo=float(item["saldo"]),
            time_escalado=TimeEscalado(),
        )
        for item in _ler(filename)
    ]


def salvar_rodadas(filename: PathLike, rodadas: Iterable[Rodada]) -> None:
    """Write the number of each round."""
    _gravar(filename, [{"numero": r.numero} for r in rodadas])


def carregar_rodadas(filename: PathLike) -> list[Rodada]:
    """Load rounds; a missing file gives an empty list."""
    return [Rodada(numero=item["numero"]) for item in _ler(filename)]