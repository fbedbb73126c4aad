"""shopmesh core: domain, application and infrastructure layers."""
