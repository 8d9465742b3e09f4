"""Well-known entity label keys and metric set types."""

LABEL_RESOURCE_ID = "resourceId"
LABEL_METRIC_SET_TYPE = "type"
LABEL_HOSTNAME = "hostname"
LABEL_NAMESPACE_NAME = "namespace_name"
LABEL_POD_NAME = "pod_name"
LABEL_CONTAINER_NAME = "container_name"
LABEL_LABELS = "labels"

METRIC_SET_TYPE_POD_CONTAINER = "pod_container"
METRIC_SET_TYPE_SYSTEM_CONTAINER = "sys_container"
METRIC_SET_TYPE_POD = "pod"
METRIC_SET_TYPE_NAMESPACE = "ns"
METRIC_SET_TYPE_NODE = "node"
METRIC_SET_TYPE_CLUSTER = "cluster"
