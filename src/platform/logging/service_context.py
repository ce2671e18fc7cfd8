"""
Service context extraction for distributed logging.

Identifies the emitting process in every log line: `{service}@{env}:{instance}`.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'hotel-booking')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # ECS exposes the task id at the tail of the metadata URI
    metadata_uri = os.getenv('ECS_CONTAINER_METADATA_URI_V4', '')
    if metadata_uri:
        task_id = metadata_uri.rstrip('/').split('/')[-1].split('-')[0][:8] or 'ecs'
    else:
        task_id = str(os.getpid())

    return f'{service_name}@{deploy_env}:{task_id}'
