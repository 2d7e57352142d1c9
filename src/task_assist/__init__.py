# src/task_assist/__init__.py
"""
Task Assist — configuração compartilhada para tarefas de build.

Este pacote raiz define o namespace público do Task Assist, um acumulador
de configuração em memória consultado por tarefas registradas em um
agendador externo (o runner de build).

Arquitetura em alto nível:
    - core.config → merge de opções, hashing e loader declarativo
    - core.paths  → raízes e caminhos nomeados de input/output
    - core.tasks  → descritores de tarefa e contrato do agendador
    - core.assist → `TaskAssist`, a instância compartilhada

Limites explícitos:
    - Não executa tarefas
    - Não observa arquivos
    - Não implementa grafo de dependências
"""
# src/task_assist/__init__.py
import logging

from .core.assist import TaskAssist
from .core.config.merge import deep_merge, object_merge
from .core.tasks import BoundTask, CustomRegistration, TaskRegistry, TaskScheduler

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BoundTask",
    "CustomRegistration",
    "TaskAssist",
    "TaskRegistry",
    "TaskScheduler",
    "deep_merge",
    "object_merge",
]
