"""Connectors por integração — adapters de borda para APIs externas.

Estrutura:
- openproject/: OpenProject API v3 (projetos)

Cada integração tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
