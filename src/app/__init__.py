"""App — núcleo do relay: orquestração, despacho e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: caso de uso de ingestão (valida → monta → enfileira)
- dispatch/: fila limitada e pool de workers
- services/: RelayService (estado de processo e ciclo de vida)
- infra/: implementações concretas de IO (FCM)
- protocols/: contratos/interfaces e modelos
- observability/: request_id e métricas via logs

Padrão: app executa; api adapta; config configura; utils apoia.
"""
