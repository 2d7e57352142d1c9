# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do Task Assist.

Este módulo contém testes mínimos cujo único objetivo é garantir que:
- o pacote pode ser importado
- o namespace público expõe os símbolos principais
- o ambiente de testes (pytest) está funcional

Limites explícitos:
    - Não testar lógica de merge, caminhos ou tarefas
    - Não acumular asserts funcionais
"""


def test_smoke():
    """
    Smoke test mínimo do repositório.

    Valida apenas que o pacote importa sem falhas estruturais e que o
    namespace raiz expõe `TaskAssist`.
    """
    import task_assist

    assert hasattr(task_assist, "TaskAssist")
    assert "object_merge" in task_assist.__all__
