# src/task_assist/core/tasks/registry.py
"""
Contrato do agendador externo de tarefas e registro padrão em memória.

O `TaskAssist` não executa tarefas. Ele apenas entrega funções já ligadas
ao seu contexto para um agendador que satisfaça `TaskScheduler`.

Componentes:
    - TaskScheduler → protocolo mínimo (`register_task`)
    - TaskRegistry  → implementação padrão que apenas guarda as funções

Invariantes do `TaskRegistry`:
    - Cada nome de tarefa é único
    - A ordem de registro é preservada
    - Nenhuma tarefa é executada pelo registro

Limites explícitos:
    - Não resolve dependências entre tarefas
    - Não observa arquivos
    - Não agenda execução
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Protocol, runtime_checkable

TaskFn = Callable[[], Any]


class DuplicateTaskError(ValueError):
    """Exceção levantada quando um nome de tarefa já está registrado."""


@runtime_checkable
class TaskScheduler(Protocol):
    """
    Capacidade mínima exigida do agendador externo de tarefas.

    `register_task` é chamado exatamente uma vez por `set_task` que use
    um `BoundTask`. A função recebida não tem argumentos: o contexto de
    configuração já está ligado a ela.
    """

    def register_task(self, name: str, fn: TaskFn) -> None:
        ...


@dataclass
class TaskRegistry:
    """
    Agendador padrão em memória: guarda funções de tarefa por nome.

    Usado quando nenhum agendador externo é fornecido ao `TaskAssist`.
    """

    _tasks: Dict[str, TaskFn] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def register_task(self, name: str, fn: TaskFn) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("task name must be a non-empty string")

        if name in self._tasks:
            raise DuplicateTaskError(f"Duplicate task name: {name}")

        self._tasks[name] = fn
        self._order.append(name)

    def get(self, name: str) -> TaskFn:
        return self._tasks[name]

    def names(self) -> List[str]:
        return list(self._order)

    def __contains__(self, name: object) -> bool:
        return name in self._tasks

    def __len__(self) -> int:
        return len(self._order)
