"""Persistence for users, projects and tasks.

Routers never build queries themselves; they go through a store bound to the
request's session. Filters are plain equality filters (``filter_by``). For
updates and deletes the filter carries the ownership predicate, so a row the
caller may not touch is reported exactly like a missing one: ``None``.
"""
import logging
from sqlalchemy.orm import Session, selectinload
from app.models.user import User
from app.models.project import Project
from app.models.task import Task

logger = logging.getLogger(__name__)


class Store:
    model = None
    default_order = ()
    default_options = ()

    def __init__(self, db: Session):
        self.db = db

    def _query(self, options=None, **filters):
        query = self.db.query(self.model)
        opts = self.default_options if options is None else options
        if opts:
            query = query.options(*opts)
        if filters:
            query = query.filter_by(**filters)
        return query

    def create(self, **values):
        record = self.model(**values)
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        logger.info("created %s %s", self.model.__tablename__, record.id)
        return record

    def find_by_id(self, record_id):
        return self._query(id=record_id).first()

    def find_one(self, **filters):
        return self._query(**filters).first()

    def find_many(self, order_by=None, options=None, **filters):
        query = self._query(options=options, **filters)
        order = self.default_order if order_by is None else order_by
        if order:
            query = query.order_by(*order)
        return query.all()

    def exists(self, **filters) -> bool:
        return self.db.query(self._query(options=(), **filters).exists()).scalar()

    def find_one_and_update(self, filters: dict, patch: dict):
        """Apply ``patch`` to the single row matching every filter.

        Only the keys present in ``patch`` are written. Returns the updated
        record, or None when nothing matched.
        """
        record = self._query(**filters).with_for_update().first()
        if record is None:
            self.db.rollback()
            return None
        for key, value in patch.items():
            setattr(record, key, value)
        self.db.commit()
        self.db.refresh(record)
        return record

    def find_one_and_delete(self, **filters):
        record = self._query(**filters).first()
        if record is None:
            return None
        record_id = record.id
        self.db.delete(record)
        self.db.commit()
        logger.info("deleted %s %s", self.model.__tablename__, record_id)
        return record


class UserStore(Store):
    model = User
    default_order = (User.created_at.desc(), User.id.desc())

    def find_by_email(self, email):
        return self.find_one(email=email)


class ProjectStore(Store):
    model = Project
    default_order = (Project.created_at.desc(), Project.id.desc())
    default_options = (selectinload(Project.owner),)


class TaskStore(Store):
    model = Task
    default_order = (Task.created_at, Task.id)
    default_options = (
        selectinload(Task.assignee),
        selectinload(Task.project),
    )
