# src/task_assist/core/tasks/__init__.py
"""
Registro de tarefas do Task Assist.

- **descriptor**
  - `BoundTask`, `CustomRegistration`: variantes explícitas de descritor
  - `InvalidTaskDescriptorError`: descritor fora das variantes aceitas

- **registry**
  - `TaskScheduler` (Protocol): contrato do agendador externo
  - `TaskRegistry`: agendador padrão em memória
  - `DuplicateTaskError`: nome de tarefa repetido
"""

from .descriptor import (
    BoundTask,
    CustomRegistration,
    InvalidTaskDescriptorError,
    TaskDescriptor,
)
from .registry import DuplicateTaskError, TaskRegistry, TaskScheduler

__all__ = [
    "BoundTask",
    "CustomRegistration",
    "DuplicateTaskError",
    "InvalidTaskDescriptorError",
    "TaskDescriptor",
    "TaskRegistry",
    "TaskScheduler",
]
