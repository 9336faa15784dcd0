"""
Logging estruturado da aplicação (AWS Lambda Powertools)
O service name segue o DD_SERVICE para correlacionar logs e traces no Datadog
"""
import os
from typing import Optional

from aws_lambda_powertools import Logger

from shared.config.settings import LOG_LEVEL

DEFAULT_SERVICE_NAME = 'weatherdesk-backend'


def get_logger(service_name: Optional[str] = None, child: bool = False) -> Logger:
    """
    Cria um Logger Powertools

    Args:
        service_name: Nome do serviço; sem valor, usa DD_SERVICE ou o padrão
        child: Child logger dos módulos (compartilha as chaves do logger raiz,
            inclusive as injetadas por inject_lambda_context)

    Returns:
        Logger com saída JSON em UTC
    """
    service = service_name or os.environ.get('DD_SERVICE', DEFAULT_SERVICE_NAME)

    if child:
        return Logger(service=service, child=True)

    return Logger(service=service, level=LOG_LEVEL, utc=True)


# Logger raiz, compartilhado pelo handler e pelo ExceptionHandlerService
logger = get_logger()
