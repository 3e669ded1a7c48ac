"""
Client Services Module
======================

Business logic for maintaining laundry clients and their favourite
linen categories.

Classes:
    ClientService: Client CRUD with duplicate checks and soft deletion.

Example:
    Registering a client::

        from apps.clients.services import ClientService

        client = ClientService.create_client(
            name='Ocean View Hotel',
            email='accounts@oceanview.example.com',
        )
"""

import logging

from django.db import transaction
from django.db.models import Q

from apps.catalog.exceptions import CategoryNotFoundError
from apps.catalog.models import LinenCategory
from .exceptions import (
    ClientNotFoundError,
    DuplicateClientNameError,
    DuplicateClientEmailError,
)
from .models import Client, ClientFavoriteCategory


logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ['name', 'contact_number', 'email', 'address', 'logo_url', 'is_active']


class ClientService:
    """
    Service for client maintenance.

    Names are compared case-insensitively and emails are stored lowercased,
    so 'Ocean View' and 'ocean view' count as the same client.
    """

    @staticmethod
    def list_clients(search=None, include_inactive=False):
        """
        Clients ordered by name.

        Args:
            search (str, optional): Substring of name, email or contact number.
            include_inactive (bool): Also return deactivated clients.
        """
        queryset = Client.objects.all()

        if not include_inactive:
            queryset = queryset.filter(is_active=True)

        if search:
            search = search.strip()
            queryset = queryset.filter(
                Q(name__icontains=search) |
                Q(email__icontains=search) |
                Q(contact_number__icontains=search)
            )

        return queryset.order_by('name')

    @staticmethod
    def get_client(client_id):
        try:
            return Client.objects.get(id=client_id)
        except Client.DoesNotExist:
            raise ClientNotFoundError()

    @staticmethod
    def _check_duplicates(name=None, email=None, exclude_id=None):
        others = Client.objects.all()
        if exclude_id is not None:
            others = others.exclude(id=exclude_id)

        if name and others.filter(name__iexact=name).exists():
            raise DuplicateClientNameError()
        if email and others.filter(email__iexact=email).exists():
            raise DuplicateClientEmailError()

    @staticmethod
    def _clean(data):
        cleaned = {}
        for field, value in data.items():
            if field not in EDITABLE_FIELDS:
                continue
            if isinstance(value, str):
                value = value.strip()
            if field == 'email':
                value = value.lower() if value else None
            cleaned[field] = value
        return cleaned

    @staticmethod
    @transaction.atomic
    def create_client(**data):
        """
        Create a client.

        Raises:
            DuplicateClientNameError: If the name is already used.
            DuplicateClientEmailError: If the email is already used.
        """
        data = ClientService._clean(data)
        ClientService._check_duplicates(name=data.get('name'), email=data.get('email'))

        client = Client.objects.create(**data)
        logger.info("Client created: %s (%s)", client.name, client.id)
        return client

    @staticmethod
    @transaction.atomic
    def update_client(client_id, data):
        """
        Partially update a client.

        Raises:
            ClientNotFoundError: If the client doesn't exist.
            DuplicateClientNameError / DuplicateClientEmailError on conflicts.
        """
        try:
            client = Client.objects.select_for_update().get(id=client_id)
        except Client.DoesNotExist:
            raise ClientNotFoundError()

        data = ClientService._clean(data)
        ClientService._check_duplicates(
            name=data.get('name'),
            email=data.get('email'),
            exclude_id=client.id,
        )

        for field, value in data.items():
            setattr(client, field, value)

        client.save()
        return client

    @staticmethod
    @transaction.atomic
    def deactivate_client(client_id):
        """Soft delete: existing batches keep referring to the client."""
        try:
            client = Client.objects.select_for_update().get(id=client_id)
        except Client.DoesNotExist:
            raise ClientNotFoundError()

        client.is_active = False
        client.save(update_fields=['is_active', 'updated_at'])
        logger.info("Client deactivated: %s (%s)", client.name, client.id)
        return client

    @staticmethod
    def favorite_category_ids(client_id):
        client = ClientService.get_client(client_id)
        return list(
            ClientFavoriteCategory.objects
            .filter(client=client)
            .values_list('linen_category_id', flat=True)
        )

    @staticmethod
    @transaction.atomic
    def set_favorite(client_id, linen_category_id, favorite=True):
        """
        Mark or unmark a category as a client favourite.

        Returns:
            list: The client's favourite category ids after the change.
        """
        client = ClientService.get_client(client_id)

        try:
            category = LinenCategory.objects.get(id=linen_category_id)
        except LinenCategory.DoesNotExist:
            raise CategoryNotFoundError()

        if favorite:
            ClientFavoriteCategory.objects.get_or_create(
                client=client,
                linen_category=category,
            )
        else:
            ClientFavoriteCategory.objects.filter(
                client=client,
                linen_category=category,
            ).delete()

        return ClientService.favorite_category_ids(client.id)
