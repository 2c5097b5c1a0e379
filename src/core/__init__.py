"""Core de orderflow: dominio, puertos, casos de uso y configuración.

Nada de este paquete importa adaptadores ni librerías de infraestructura.
"""
