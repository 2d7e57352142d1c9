# src/task_assist/core/options.py
"""
Armazenamento de blocos de opções nomeados.

Cada nome de opção aponta para um bloco (dicionário aninhado arbitrário).
Um bloco pode ser substituído por inteiro ou atualizado de forma
incremental via `object_merge`.

Invariantes:
    - Um bloco mantém o formato acumulado pelos merges até ser substituído
    - Listas dentro de um bloco são sempre substituídas atomicamente
    - `blocks` é público e pode ser lido diretamente pelas tarefas
"""

from __future__ import annotations

import logging
from copy import deepcopy
from typing import Any, Dict

from .config.merge import object_merge

logger = logging.getLogger(__name__)


def snapshot_value(value: Any) -> Any:
    """
    Copia `value` recursivamente para uso em snapshots.

    Dicts, listas e tuplas são sempre copiados. Folhas que não aceitam
    `deepcopy` (geradores, streams abertos) entram no snapshot como a
    própria referência.
    """
    if isinstance(value, dict):
        return {key: snapshot_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        copied = [snapshot_value(item) for item in value]
        return copied if isinstance(value, list) else tuple(copied)
    try:
        return deepcopy(value)
    except TypeError:
        return value


class OptionStore:
    def __init__(self) -> None:
        self.blocks: Dict[str, Any] = {}

    def set(self, name: str, param: Any, diff: bool = True) -> None:
        """
        Grava `param` sob `name`.

        Sem bloco anterior, ou com `diff=False`, o bloco é substituído por
        inteiro (inclusive por None). Caso contrário `param` é mesclado no
        bloco existente.

        Raises:
            MergeTypeError: No modo diff, se o bloco existente ou `param`
                não forem dicionários.
        """
        if name not in self.blocks or diff is False:
            logger.debug("option %r replaced", name)
            self.blocks[name] = param
            return

        logger.debug("option %r merged", name)
        self.blocks[name] = object_merge(self.blocks[name], param)

    def snapshot(self) -> Dict[str, Any]:
        return snapshot_value(self.blocks)

    def __contains__(self, name: str) -> bool:
        return name in self.blocks

    def __getitem__(self, name: str) -> Any:
        return self.blocks[name]
