from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.modules.classification.service import ImageClassifier
from src.modules.identification.reconciler import IdentificationReconciler
from src.modules.identification.store import IdentificationStore
from src.modules.vessels.service import VesselDirectory


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get database session from app state."""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield session


AsyncSessionDep = Annotated[AsyncSession, Depends(get_db_session)]


async def get_identification_store(db: AsyncSessionDep) -> IdentificationStore:
    """Get identification store with database session."""
    return IdentificationStore(db)


def get_image_classifier(request: Request) -> ImageClassifier:
    """Get the classifier built at startup."""
    return request.app.state.image_classifier


def get_vessel_directory(request: Request) -> VesselDirectory:
    """Get the vessel directory built at startup."""
    return request.app.state.vessel_directory


def get_upload_dir(request: Request) -> Path:
    return request.app.state.upload_dir


ImageClassifierDep = Annotated[ImageClassifier, Depends(get_image_classifier)]
VesselDirectoryDep = Annotated[VesselDirectory, Depends(get_vessel_directory)]
UploadDirDep = Annotated[Path, Depends(get_upload_dir)]


def get_identification_reconciler(
    classifier: ImageClassifierDep, directory: VesselDirectoryDep
) -> IdentificationReconciler:
    return IdentificationReconciler(classifier, directory)


IdentificationStoreDep = Annotated[
    IdentificationStore, Depends(get_identification_store)
]
IdentificationReconcilerDep = Annotated[
    IdentificationReconciler, Depends(get_identification_reconciler)
]
