"""App — aplicação ASGI, composition root e infraestrutura transversal.

Subpastas:
- bootstrap/: inicialização de logging, validação de settings e factories
- observability/: correlation_id e log de requisições
- protocols/: contratos usados pela camada de rotas

Padrão: app executa e conecta; api adapta; config parametriza.
"""
