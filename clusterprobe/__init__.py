"""clusterprobe - SNMP value helpers and an Elasticsearch leader check."""

__version__ = "0.1.0"
