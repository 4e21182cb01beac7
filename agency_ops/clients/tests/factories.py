from factory import Faker
from factory import Sequence
from factory import SubFactory
from factory.django import DjangoModelFactory

from agency_ops.clients.models import Client
from agency_ops.clients.models import Project
from agency_ops.clients.models import Task


class ClientFactory(DjangoModelFactory):
    name = Sequence(lambda n: f"Client {n}")
    company = Faker("company")

    class Meta:
        model = Client


class ProjectFactory(DjangoModelFactory):
    client = SubFactory(ClientFactory)
    title = Sequence(lambda n: f"Project {n}")

    class Meta:
        model = Project


class TaskFactory(DjangoModelFactory):
    project = SubFactory(ProjectFactory)
    title = Sequence(lambda n: f"Task {n}")

    class Meta:
        model = Task
