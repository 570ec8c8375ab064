"""API — camada de borda HTTP e adapters de integrações.

Responsabilidades:
- Receber requests HTTP e devolver o envelope JSON padrão
- Conectar-se a sistemas externos (OpenProject)
- Normalizar payloads externos para modelos internos

Subpastas:
- connectors/: adapters HTTP por integração
- normalizers/: conversão de payloads externos -> modelos internos
- routes/: endpoints HTTP (health, info, conteúdo, integrações)
- responses.py: envelope JSON de sucesso/erro

NÃO PODE conter: regras de negócio de conteúdo nem persistência.
"""
