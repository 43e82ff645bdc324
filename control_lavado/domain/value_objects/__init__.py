"""
Value Objects para el dominio de la lavadora.

Este paquete contiene los objetos de valor (value objects) que representan
conceptos inmutables del dominio: materiales, programas, códigos de error,
etapas del ciclo y porcentajes.
"""
