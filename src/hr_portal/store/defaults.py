"""Built-in seed datasets, returned when a kind has never been persisted."""

from __future__ import annotations

from typing import List

from ..core.enums import (
    ObjectiveCategory,
    ObjectiveStatus,
    Priority,
    RequestStatus,
    Role,
    TrainingStatus,
    VacationType,
)
from ..employees.model import Employee
from ..objectives.model import Objective
from ..trainings.model import Training
from ..users.model import User
from ..vacations.model import VacationRequest


def default_employees() -> List[Employee]:
    return [
        Employee(
            id="1",
            email="meryem.hamidi@teal-tech.com",
            first_name="Meryem",
            last_name="Hamidi",
            role=Role.ADMIN,
            department="Administration",
            position="Administrateur Système",
            hire_date="2023-01-15",
            salary=65000,
            skills=["Administration", "Gestion", "Leadership"],
            performance=4.8,
        ),
        Employee(
            id="2",
            email="kenza.hamidi@teal-tech.com",
            first_name="Kenza",
            last_name="Hamidi",
            role=Role.HR,
            department="Ressources Humaines",
            position="Responsable RH",
            hire_date="2023-02-01",
            salary=58000,
            manager_id="1",
            skills=["Recrutement", "Formation", "Gestion RH"],
            performance=4.6,
        ),
        Employee(
            id="3",
            email="nasma.hamidi@teal-tech.com",
            first_name="Nasma",
            last_name="Hamidi",
            role=Role.MANAGER,
            department="Développement",
            position="Chef de Projet",
            hire_date="2022-11-15",
            salary=62000,
            manager_id="1",
            skills=["Management", "Scrum", "Leadership"],
            performance=4.7,
        ),
        Employee(
            id="4",
            email="youssef.hamidi@teal-tech.com",
            first_name="Youssef",
            last_name="Hamidi",
            role=Role.EMPLOYEE,
            department="Développement",
            position="Développeur Senior",
            hire_date="2023-03-10",
            salary=55000,
            manager_id="3",
            skills=["React", "Node.js", "TypeScript"],
            performance=4.5,
        ),
        Employee(
            id="5",
            email="simo.hamidi@teal-tech.com",
            first_name="Simo",
            last_name="Hamidi",
            role=Role.EMPLOYEE,
            department="Développement",
            position="Développeur Frontend",
            hire_date="2023-04-01",
            salary=48000,
            manager_id="3",
            skills=["React", "Vue.js", "CSS"],
            performance=4.2,
        ),
    ]


def default_objectives() -> List[Objective]:
    return [
        Objective(
            id="1",
            employee_id="4",
            employee_name="Youssef Hamidi",
            title="Développer le module de facturation",
            description="Créer un système de facturation automatisé intégrant les APIs de paiement",
            category=ObjectiveCategory.DEVELOPMENT,
            priority=Priority.HIGH,
            status=ObjectiveStatus.IN_PROGRESS,
            start_date="2024-01-15",
            due_date="2024-03-15",
            progress=65,
            manager_id="3",
            manager_name="Nasma Hamidi",
        ),
        Objective(
            id="2",
            employee_id="5",
            employee_name="Simo Hamidi",
            title="Améliorer les performances UI",
            description="Optimiser les temps de chargement et réduire la consommation de ressources",
            category=ObjectiveCategory.PERFORMANCE,
            priority=Priority.MEDIUM,
            status=ObjectiveStatus.IN_PROGRESS,
            start_date="2024-02-01",
            due_date="2024-04-01",
            progress=40,
            manager_id="3",
            manager_name="Nasma Hamidi",
        ),
    ]


def default_trainings() -> List[Training]:
    return [
        Training(
            id="1",
            title="Formation React Avancé",
            description="Approfondissez vos connaissances en React avec les hooks et patterns avancés",
            start_date="2024-03-15",
            end_date="2024-03-22",
            status=TrainingStatus.SCHEDULED,
            instructor="Lina Hamidi",
            duration=40,
            category="Développement",
        ),
        Training(
            id="2",
            title="Gestion de Projet Agile",
            description="Maîtrisez les méthodologies Scrum et Kanban",
            start_date="2024-04-01",
            end_date="2024-04-05",
            status=TrainingStatus.SCHEDULED,
            instructor="Kenza Hamidi",
            duration=24,
            category="Management",
        ),
    ]


def default_vacations() -> List[VacationRequest]:
    return [
        VacationRequest(
            id="1",
            employee_id="4",
            employee_name="Youssef Hamidi",
            start_date="2024-03-01",
            end_date="2024-03-05",
            days=5,
            type=VacationType.VACATION,
            reason="Congés annuels",
            status=RequestStatus.PENDING,
            request_date="2024-02-15",
        ),
        VacationRequest(
            id="2",
            employee_id="5",
            employee_name="Simo Hamidi",
            start_date="2024-04-10",
            end_date="2024-04-12",
            days=3,
            type=VacationType.PERSONAL,
            reason="Congés personnels",
            status=RequestStatus.APPROVED,
            request_date="2024-02-20",
            approved_by="2",
            approved_date="2024-02-22",
        ),
    ]


def default_users() -> List[User]:
    # Accounts mirror the seeded employees.
    return [
        User(
            id=e.id,
            email=e.email,
            first_name=e.first_name,
            last_name=e.last_name,
            role=e.role,
            department=e.department,
            position=e.position,
            hire_date=e.hire_date,
            is_active=e.is_active,
        )
        for e in default_employees()
    ]
