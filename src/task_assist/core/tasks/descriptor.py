# src/task_assist/core/tasks/descriptor.py
"""
Descritores de tarefa aceitos por `TaskAssist.set_task`.

Um descritor é uma variante explícita:
    - BoundTask          → função de tarefa que recebe a configuração
                           como contexto e é entregue ao agendador
    - CustomRegistration → callback que assume todo o registro
                           da tarefa, recebendo (nome, contexto)

A escolha da variante acontece na construção do descritor, e não por
inspeção de atributos no momento do registro.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union


class InvalidTaskDescriptorError(TypeError):
    """Descritor recebido não é `BoundTask` nem `CustomRegistration`."""


@dataclass(frozen=True)
class BoundTask:
    """
    Função de tarefa a ser ligada a um contexto de configuração.

    Campos:
        - task: callable que recebe o contexto como único argumento
    """
    task: Callable[[Any], Any]

    def __post_init__(self) -> None:
        if not callable(self.task):
            raise InvalidTaskDescriptorError("BoundTask.task must be callable")


@dataclass(frozen=True)
class CustomRegistration:
    """
    Callback de registro customizado.

    Campos:
        - set_func: callable invocado como `set_func(name, context)`
    """
    set_func: Callable[[str, Any], Any]

    def __post_init__(self) -> None:
        if not callable(self.set_func):
            raise InvalidTaskDescriptorError("CustomRegistration.set_func must be callable")


TaskDescriptor = Union[BoundTask, CustomRegistration]
