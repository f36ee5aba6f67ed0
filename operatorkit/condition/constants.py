"""Common condition types, reasons and messages used by API objects."""

# Condition types

# Summarises the operational state of an API object.
READY_CONDITION = "Ready"
# All required input sources (secrets, config maps, ...) are available.
INPUT_READY_CONDITION = "InputReady"
# Service config got rendered from the templates and stored in the ConfigMap.
SERVICE_CONFIG_READY_CONDITION = "ServiceConfigReady"
# Mirrored from the Ready condition of the database object.
DB_READY_CONDITION = "DBReady"
# The dbsync job completed.
DB_SYNC_READY_CONDITION = "DBSyncReady"
# Services and routes exposing the service were created.
EXPOSE_SERVICE_READY_CONDITION = "ExposeServiceReady"
# The bootstrap job completed.
BOOTSTRAP_READY_CONDITION = "BootstrapReady"
# The deployment or statefulset of the service was created.
DEPLOYMENT_READY_CONDITION = "DeploymentReady"
# Mirrored from the Ready condition of the keystone service object.
KEYSTONE_SERVICE_READY_CONDITION = "KeystoneServiceReady"
# Mirrored from the Ready condition of the keystone endpoint object.
KEYSTONE_ENDPOINT_READY_CONDITION = "KeystoneEndpointReady"
# All pods show configured interfaces with addresses for every network attachment.
NETWORK_ATTACHMENTS_READY_CONDITION = "NetworkAttachmentsReady"
# Cron jobs were created.
CRON_JOB_READY_CONDITION = "CronJobReady"
# Jobs were created.
JOB_READY_CONDITION = "JobReady"
# The memcached service is ready to be consumed.
MEMCACHED_READY_CONDITION = "MemcachedReady"
# The RabbitMQ transport URL is ready.
RABBITMQ_TRANSPORT_URL_READY_CONDITION = "RabbitMqTransportURLReady"
# The AnsibleEE run was created.
ANSIBLE_EE_CONDITION = "AnsibleEEReady"
SERVICE_ACCOUNT_READY_CONDITION = "ServiceAccountReady"
ROLE_READY_CONDITION = "RoleReady"
ROLE_BINDING_READY_CONDITION = "RoleBindingReady"
# Required TLS sources are ready.
TLS_INPUT_READY_CONDITION = "TLSInputReady"

# Reasons

REQUESTED_REASON = "Requested"
NOT_REQUESTED_REASON = "NotRequested"
CREATION_FAILED_REASON = "CreationFailed"
READY_REASON = "Ready"
INIT_REASON = "Init"
ERROR_REASON = "Error"
DELETING_REASON = "Deleting"
DELETION_FAILED_REASON = "DeletionFailed"
DELETED_REASON = "Deleted"

# Messages; those holding "%s" take one argument.

READY_INIT_MESSAGE = "Setup started"
READY_MESSAGE = "Setup complete"

INPUT_READY_INIT_MESSAGE = "Input data not checked"
INPUT_READY_MESSAGE = "Input data complete"
INPUT_READY_WAITING_MESSAGE = "Input data resources missing"
INPUT_READY_ERROR_MESSAGE = "Input data error occurred %s"

SERVICE_CONFIG_READY_INIT_MESSAGE = "Service config create not started"
SERVICE_CONFIG_READY_MESSAGE = "Service config create completed"
SERVICE_CONFIG_READY_ERROR_MESSAGE = "Service config create error occurred %s"

DB_READY_INIT_MESSAGE = "DB create not started"
DB_READY_MESSAGE = "DB create completed"
DB_READY_RUNNING_MESSAGE = "DB create job still running"
DB_READY_ERROR_MESSAGE = "DB create job error occurred %s"

DB_SYNC_READY_INIT_MESSAGE = "DBsync not started"
DB_SYNC_READY_MESSAGE = "DBsync completed"
DB_SYNC_READY_RUNNING_MESSAGE = "DBsync job still running"
DB_SYNC_READY_ERROR_MESSAGE = "DBsync job error occurred %s"

EXPOSE_SERVICE_READY_INIT_MESSAGE = "Exposing service not started"
EXPOSE_SERVICE_READY_MESSAGE = "Exposing service completed"
EXPOSE_SERVICE_READY_RUNNING_MESSAGE = "Exposing service in progress"
EXPOSE_SERVICE_READY_ERROR_MESSAGE = "Exposing service error occurred %s"

BOOTSTRAP_READY_INIT_MESSAGE = "Bootstrap not started"
BOOTSTRAP_READY_MESSAGE = "Bootstrap completed"
BOOTSTRAP_READY_RUNNING_MESSAGE = "Bootstrap in progress"
BOOTSTRAP_READY_ERROR_MESSAGE = "Bootstrap error occurred %s"

DEPLOYMENT_READY_INIT_MESSAGE = "Deployment not started"
DEPLOYMENT_READY_MESSAGE = "Deployment completed"
DEPLOYMENT_READY_RUNNING_MESSAGE = "Deployment in progress"
DEPLOYMENT_READY_ERROR_MESSAGE = "Deployment error occurred %s"

NETWORK_ATTACHMENTS_READY_INIT_MESSAGE = "NetworkAttachments not started"
NETWORK_ATTACHMENTS_READY_MESSAGE = "NetworkAttachments completed"
NETWORK_ATTACHMENTS_READY_WAITING_MESSAGE = "NetworkAttachment resources missing: %s"
NETWORK_ATTACHMENTS_READY_ERROR_MESSAGE = "NetworkAttachments error occurred %s"

CRON_JOB_READY_INIT_MESSAGE = "CronJob not started"
CRON_JOB_READY_MESSAGE = "CronJob completed"
CRON_JOB_READY_ERROR_MESSAGE = "CronJob error occurred %s"

JOB_READY_INIT_MESSAGE = "Job not started"
JOB_READY_MESSAGE = "Job completed"
JOB_READY_RUNNING_MESSAGE = "Job in progress"
JOB_READY_ERROR_MESSAGE = "Job error occurred %s"

MEMCACHED_READY_INIT_MESSAGE = " Memcached create not started"
MEMCACHED_READY_MESSAGE = " Memcached instance has been provisioned"
MEMCACHED_READY_WAITING_MESSAGE = " Memcached instance has not been provisioned"
MEMCACHED_READY_ERROR_MESSAGE = " Memcached error occurred %s"

RABBITMQ_TRANSPORT_URL_READY_INIT_MESSAGE = "RabbitMqTransportURL not started"
RABBITMQ_TRANSPORT_URL_READY_RUNNING_MESSAGE = "RabbitMqTransportURL creation in progress"
RABBITMQ_TRANSPORT_URL_READY_MESSAGE = "RabbitMqTransportURL successfully created"
RABBITMQ_TRANSPORT_URL_READY_ERROR_MESSAGE = "RabbitMqTransportURL error occured %s"

ANSIBLE_EE_READY_INIT_MESSAGE = "AnsibleEE not started"
ANSIBLE_EE_READY_MESSAGE = "AnsibleEE completed"
ANSIBLE_EE_READY_RUNNING_MESSAGE = "AnsibleEE in progress"
ANSIBLE_EE_READY_ERROR_MESSAGE = "AnsibleEE error occurred %s"

TLS_INPUT_ERROR_MESSAGE = "TLSInput error occured in TLS sources %s"

SERVICE_ACCOUNT_READY_ERROR_MESSAGE = "ServiceAccount error occurred %s"
SERVICE_ACCOUNT_CREATING_MESSAGE = "ServiceAccount creation in progress"
SERVICE_ACCOUNT_READY_INIT_MESSAGE = "ServiceAccount not created"
SERVICE_ACCOUNT_READY_MESSAGE = "ServiceAccount created"

ROLE_READY_ERROR_MESSAGE = "Role error occurred %s"
ROLE_CREATING_MESSAGE = "Role creation in progress"
ROLE_READY_INIT_MESSAGE = "Role not created"
ROLE_READY_MESSAGE = "Role created"

ROLE_BINDING_READY_ERROR_MESSAGE = "RoleBinding error occurred %s"
ROLE_BINDING_CREATING_MESSAGE = "RoleBinding creation in progress"
ROLE_BINDING_READY_INIT_MESSAGE = "RoleBinding not created"
ROLE_BINDING_READY_MESSAGE = "RoleBinding created"