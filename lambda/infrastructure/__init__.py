"""
Infrastructure Layer - Clean Architecture
Contém implementações concretas dos providers upstream, cache em memória e o adapter HTTP
"""
