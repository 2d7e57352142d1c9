# src/task_assist/core/config/__init__.py

"""
Camada de configuração do Task Assist.

Responsabilidades do pacote:
    - Merge recursivo de blocos de opções (listas são atômicas)
    - Hierarquia de exceções de configuração
    - Hash canônico de snapshots
    - Carregamento de arquivos YAML/JSON (defaults + overrides locais)

Invariantes:
    - Blocos de configuração são dicionários puros (dict)
    - Listas nunca são mescladas elemento a elemento

Limites explícitos:
    - Não registra nem executa tarefas
"""
