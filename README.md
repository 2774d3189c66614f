# cartola

A small fantasy football game played in the terminal. Each user logs in by
name; a new name is registered with a team called "<name> FC" and a starting
balance of 100.0. From there the user can buy and sell players on the market,
choose up to eleven of the players they own as starters, play a round that
adds up the starters' scores, and see a ranking of every user's team.

## Installing

```
pip install .
```

## Playing

```
cartola
cartola --data-dir path/to/data
```

The game reads its data from the directory given by `--data-dir`, which is
`data` (relative to the current working directory) by default:

- `jogadores.json` lists the players on the market. Each entry has the
  fields `id`, `nome`, `posicao`, `preco`, `gols`, `assistencias`,
  `cartoes_amarelos`, `cartoes_vermelhos` and `pontuacao`.
- `usuarios.json` stores the users as `id`, `nome` and `saldo`. It is
  written again after a user registers, after each visit to the market and
  after each round.
- `rodadas.json` holds the rounds, each stored as `numero`. It is read at
  start-up.

If a file is missing, the game starts with an empty list for it.

### Menus

The first menu offers `1` to log in or register, and `0` to quit. After you
log in, the user menu shows your balance, team name and total score, and
offers:

1. Player market: lists the players you do not own yet. Buy one by id if
   your balance covers its price (buying a player you already own is
   refused). Selling by id removes that player from your squad and line-up
   and credits the market price of the player with that id. `0` returns to
   the user menu.
2. Pick your team: enter up to 11 ids of players you own, separated by
   spaces, on one line. Ids you do not own are ignored.
3. Play a round: each starter takes its score from the player data, and the
   team total is the sum of those scores.
4. Show the ranking: all teams, highest score first.
5. Log out.

Choose 0 to quit. The game also ends when input runs out.

## What it does not do

Only each user's id, name and balance are saved. Bought players, the
line-up and the team score are kept in memory for the session only; after a
restart every user starts with an empty squad. Rounds are loaded but the game
does not add or save new ones, and player scores come only from
`jogadores.json` as it was when the game started.

## Using it as a library

```python
from cartola.models import Jogador, TimeEscalado, Usuario
from cartola.rodada import Rodada
from cartola.cli import ranking

usuario = Usuario(1, "ana", 100.0, TimeEscalado(1, "ana FC"))
usuario.comprar_jogador(Jogador(7, "Rafa", "Atacante", 12.5))
usuario.escalar_time([7])

Rodada(1).atualizar_pontuacoes([usuario], [Jogador(7, pontuacao=8.0)])
print(ranking([usuario]))  # [('ana', 8.0)]
```

The modules are:

- `cartola.models`: `Pessoa`, `Jogador`, `TimeEscalado`, `Usuario`.
  `Usuario.comprar_jogador` returns whether the purchase was made;
  `Usuario.escalar_time` sets and returns the starters.
- `cartola.mercado`: `Mercado`, whose `comprar_jogador` and
  `vender_jogador` take an id, a balance and a list of players, change the
  list and return the new balance, raising `ErroMercado` when the purchase or
  sale cannot be made.
- `cartola.rodada`: `Rodada`, with `atualizar_pontuacoes` to copy player
  scores onto every user's starters and recompute team totals.
- `cartola.storage`: `carregar_jogadores`, `salvar_usuarios`,
  `carregar_usuarios`, `salvar_rodadas`, `carregar_rodadas`.
- `cartola.cli`: `App` (the interactive session; `App.run()` starts it),
  `ranking` and `main`.

## Running the tests

```
pip install .[test]
pytest
```