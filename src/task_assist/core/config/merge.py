# src/task_assist/core/config/merge.py
"""
Merge recursivo de blocos de opções.

Este módulo implementa a política de merge usada pelo `TaskAssist` para
acumular atualizações incrementais de um bloco de opções nomeado.

Política de merge:
    - dict + dict → merge recursivo por chave
    - list / tuple → sobrescrita total (nunca elemento a elemento)
    - None, escalar ou tipos divergentes → sobrescrita direta

Diferente de um merge funcional, `object_merge` é destrutivo: a base é
alterada no lugar e devolvida. `deep_merge` oferece a variante que não
muta nenhum dos inputs.

Invariantes:
    - Chaves presentes apenas na base são preservadas
    - Chaves presentes apenas em `add` são adicionadas
    - Aplicar o mesmo `add` duas vezes produz o mesmo valor final

Limites explícitos:
    - Não conhece opções nem caminhos
    - Não realiza coerção de tipos
    - Não concatena listas
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import MergeTypeError


def _is_plain_object(value: Any) -> bool:
    return isinstance(value, dict)


def object_merge(base: Dict[str, Any], add: Dict[str, Any]) -> Dict[str, Any]:
    """
    Mescla `add` dentro de `base`, alterando `base` no lugar.

    Para cada chave de `add`:
        - se o valor atual em `base` e o valor de `add` forem ambos dicts,
          os dois são mesclados recursivamente
        - em qualquer outro caso o valor de `add` sobrescreve o da base

    Args:
        base (Dict[str, Any]): Estrutura que recebe o merge (mutada).
        add (Dict[str, Any]): Estrutura com os valores a aplicar.

    Returns:
        Dict[str, Any]: O próprio objeto `base`, já mesclado.

    Raises:
        MergeTypeError: Se `base` ou `add` não forem dicionários.
    """
    if not _is_plain_object(base) or not _is_plain_object(add):
        raise MergeTypeError(
            f"Merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(add).__name__}"
        )

    for key, value in add.items():
        current = base.get(key)
        if _is_plain_object(current) and _is_plain_object(value):
            base[key] = object_merge(current, value)
        else:
            base[key] = value

    return base


def deep_merge(base: Dict[str, Any], add: Dict[str, Any]) -> Dict[str, Any]:
    """
    Variante não destrutiva de `object_merge`.

    Ambos os inputs são copiados antes do merge, de modo que o resultado
    nunca compartilha estruturas mutáveis com `base` ou `add`.
    """
    return object_merge(deepcopy(base), deepcopy(add))
