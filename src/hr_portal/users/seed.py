"""Demo accounts served by the local user service and seeded into MySQL."""

from __future__ import annotations

from typing import List

from ..core.enums import Role
from .model import User


def demo_users() -> List[User]:
    return [
        User(
            id="1",
            first_name="Meryem",
            last_name="Hamidi",
            email="Meryem.Hamidi@teal-tech.com",
            role=Role.ADMIN,
            department="Administration",
            position="Administrateur Système",
            hire_date="2024-01-15T00:00:00.000Z",
            phone="+212 6 12 34 56 78",
            address="Casablanca, Maroc",
        ),
        User(
            id="2",
            first_name="Kenza",
            last_name="Hamidi",
            email="Kenza.Hamidi@teal-tech.com",
            role=Role.HR,
            department="Ressources Humaines",
            position="Responsable RH",
            hire_date="2024-02-01T00:00:00.000Z",
            phone="+212 6 87 65 43 21",
            address="Rabat, Maroc",
        ),
        User(
            id="3",
            first_name="Lina",
            last_name="Hamidi",
            email="Lina.Hamidi@teal-tech.com",
            role=Role.HR,
            department="Développement",
            position="Chef de Projet RH",
            hire_date="2024-01-20T00:00:00.000Z",
            phone="+212 6 11 22 33 44",
            address="Casablanca, Maroc",
        ),
        User(
            id="4",
            first_name="Youssef",
            last_name="Hamidi",
            email="Youssef.Hamidi@teal-tech.com",
            role=Role.EMPLOYEE,
            department="Design",
            position="UX/UI Designer",
            hire_date="2024-01-25T00:00:00.000Z",
            phone="+212 6 33 44 55 66",
            address="Casablanca, Maroc",
        ),
        User(
            id="5",
            first_name="Simo",
            last_name="Hamidi",
            email="Simo.Hamidi@teal-tech.com",
            role=Role.EMPLOYEE,
            department="Développement",
            position="Développeur Full-Stack",
            hire_date="2024-01-30T00:00:00.000Z",
            phone="+212 6 77 88 99 00",
            address="Rabat, Maroc",
        ),
        User(
            id="6",
            first_name="Nasma",
            last_name="Hamidi",
            email="Nasma.Hamidi@teal-tech.com",
            role=Role.MANAGER,
            department="Développement",
            position="Manager Équipe",
            hire_date="2024-01-10T00:00:00.000Z",
            phone="+212 6 55 44 33 22",
            address="Casablanca, Maroc",
        ),
    ]
