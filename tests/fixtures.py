"""Example kubeconfig documents in the layout kubectl writes."""

BASIC_CONFIG = """apiVersion: v1
clusters:
- cluster:
    certificate-authority: /home/terratest/.minikube/ca.crt
    server: https://172.17.0.48:8443
  name: minikube
contexts:
- context:
    cluster: minikube
    user: minikube
  name: minikube
current-context: minikube
kind: Config
preferences: {}
users:
- name: minikube
  user:
    client-certificate: /home/terratest/.minikube/client.crt
    client-key: /home/terratest/.minikube/client.key
"""

BASIC_CONFIG_WITH_EXTRA_CLUSTER = """apiVersion: v1
clusters:
- cluster:
    certificate-authority: /home/terratest/.minikube/ca.crt
    server: https://172.17.0.48:8443
  name: minikube
- cluster:
    certificate-authority: /home/terratest/.minikube/extra_ca.crt
    server: https://172.17.0.48:8443
  name: extra_minikube
contexts:
- context:
    cluster: minikube
    user: minikube
  name: minikube
current-context: minikube
kind: Config
preferences: {}
users:
- name: minikube
  user:
    client-certificate: /home/terratest/.minikube/client.crt
    client-key: /home/terratest/.minikube/client.key
"""

BASIC_CONFIG_WITH_EXTRA_AUTH_INFO = """apiVersion: v1
clusters:
- cluster:
    certificate-authority: /home/terratest/.minikube/ca.crt
    server: https://172.17.0.48:8443
  name: minikube
contexts:
- context:
    cluster: minikube
    user: minikube
  name: minikube
current-context: minikube
kind: Config
preferences: {}
users:
- name: minikube
  user:
    client-certificate: /home/terratest/.minikube/client.crt
    client-key: /home/terratest/.minikube/client.key
- name: extra_minikube
  user:
    client-certificate: /home/terratest/.minikube/extra_client.crt
    client-key: /home/terratest/.minikube/extra_client.key
"""

BASIC_CONFIG_WITH_EXTRA_CONTEXT = """apiVersion: v1
clusters:
- cluster:
    certificate-authority: /home/terratest/.minikube/ca.crt
    server: https://172.17.0.48:8443
  name: minikube
- cluster:
    certificate-authority: /home/terratest/.minikube/extra_ca.crt
    server: https://172.17.0.48:8443
  name: extra_minikube
contexts:
- context:
    cluster: minikube
    user: minikube
  name: minikube
- context:
    cluster: extra_minikube
    user: extra_minikube
  name: extra_minikube
current-context: extra_minikube
kind: Config
preferences: {}
users:
- name: minikube
  user:
    client-certificate: /home/terratest/.minikube/client.crt
    client-key: /home/terratest/.minikube/client.key
- name: extra_minikube
  user:
    client-certificate: /home/terratest/.minikube/extra_client.crt
    client-key: /home/terratest/.minikube/extra_client.key
"""

CONFIG_WITH_SHARED_CLUSTER = """apiVersion: v1
clusters:
- cluster:
    certificate-authority: /home/terratest/.minikube/ca.crt
    server: https://172.17.0.48:8443
  name: minikube
- cluster:
    certificate-authority: /home/terratest/.minikube/extra_ca.crt
    server: https://172.17.0.48:8443
  name: extra_minikube
contexts:
- context:
    cluster: minikube
    user: minikube
  name: minikube
- context:
    cluster: extra_minikube
    user: extra_minikube
  name: extra_minikube
- context:
    cluster: extra_minikube
    user: minikube
  name: other_minikube

current-context: extra_minikube
kind: Config
preferences: {}
users:
- name: minikube
  user:
    client-certificate: /home/terratest/.minikube/client.crt
    client-key: /home/terratest/.minikube/client.key
- name: extra_minikube
  user:
    client-certificate: /home/terratest/.minikube/extra_client.crt
    client-key: /home/terratest/.minikube/extra_client.key
"""

EXPECTED_AFTER_SHARED_CLUSTER_DELETE = """apiVersion: v1
clusters:
- cluster:
    certificate-authority: /home/terratest/.minikube/extra_ca.crt
    server: https://172.17.0.48:8443
  name: extra_minikube
- cluster:
    certificate-authority: /home/terratest/.minikube/ca.crt
    server: https://172.17.0.48:8443
  name: minikube
contexts:
- context:
    cluster: minikube
    user: minikube
  name: minikube
- context:
    cluster: extra_minikube
    user: minikube
  name: other_minikube
current-context: minikube
kind: Config
preferences: {}
users:
- name: minikube
  user:
    client-certificate: /home/terratest/.minikube/client.crt
    client-key: /home/terratest/.minikube/client.key
"""
