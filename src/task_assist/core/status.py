# src/task_assist/core/status.py
"""
Flags de status compartilhadas entre as tarefas registradas.

Campos:
    - main_task_id: identificador da tarefa principal em execução
    - is_watching: indica se um loop de watch está ativo

Nenhum valor é validado na atribuição e não existe máquina de estados:
as tarefas leem e escrevem esses campos livremente.

Invariantes:
    - Existem exatamente esses dois campos; qualquer outro nome
      (ex.: `isWatching`) levanta AttributeError em vez de criar um
      atributo solto
"""

from __future__ import annotations

from typing import Any, Dict


class TaskStatus:
    __slots__ = ("main_task_id", "is_watching")

    def __init__(self, main_task_id: str = "", is_watching: bool = False) -> None:
        self.main_task_id = main_task_id
        self.is_watching = is_watching

    def to_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.__slots__}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskStatus):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None

    def __repr__(self) -> str:
        return f"TaskStatus(main_task_id={self.main_task_id!r}, is_watching={self.is_watching!r})"
