# -*- coding: utf-8 -*-
"""
backend/app/modules/clients/facades/errors.py

Excepciones de dominio para el módulo de clientes.

Autor: Atelier
Fecha: 12/08/2026
"""


class ClientNotFound(Exception):
    """Se lanza cuando no se encuentra un cliente por ID."""
    def __init__(self, client_id):
        self.client_id = client_id
        super().__init__(f"Cliente no encontrado: {client_id}")


class ClientHasProjects(Exception):
    """Se lanza al intentar borrar un cliente que aún tiene proyectos."""
    def __init__(self, client_id, project_count: int):
        self.client_id = client_id
        self.project_count = project_count
        super().__init__(f"El cliente tiene {project_count} proyecto(s) asociados")


__all__ = ["ClientNotFound", "ClientHasProjects"]

# Fin del archivo backend/app/modules/clients/facades/errors.py
