import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.auth.dependencies import SessionIdentity, get_current_identity
from backend.database import database_unavailable, get_db
from backend.models.post import Post
from backend.uploads import remove_upload, save_upload

router = APIRouter(tags=['posts'])

logger = logging.getLogger(__name__)


class PostResponse(BaseModel):
    id: int
    title: str | None = None
    description: str | None = None
    file: str

    class Config:
        from_attributes = True


class EditPostRequest(BaseModel):
    title: str
    description: str


def get_post_or_404(post_id: int, db: Session) -> Post:
    post = db.query(Post).filter(Post.id == post_id).first()
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Post not found')
    return post


@router.post('/addpost', status_code=status.HTTP_201_CREATED)
def add_post(
    identity: SessionIdentity = Depends(get_current_identity),
    title: str = Form(''),
    description: str = Form(''),
    file: UploadFile | None = File(None),
    db: Session = Depends(get_db),
):
    if file is None or not file.filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='No file uploaded')

    filename = save_upload(file, field_name='file')

    try:
        db.add(Post(title=title, description=description, file=filename))
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        remove_upload(filename)
        raise database_unavailable() from exc

    logger.info('Post %r added by %s', title, identity.email)
    return 'post added success'


@router.get('/getposts', response_model=list[PostResponse])
def list_posts(db: Session = Depends(get_db)):
    try:
        return db.query(Post).order_by(Post.id.asc()).all()
    except SQLAlchemyError as exc:
        raise database_unavailable() from exc


@router.get('/viewpost/{post_id}', response_model=PostResponse)
def view_post(post_id: int, db: Session = Depends(get_db)):
    try:
        return get_post_or_404(post_id, db)
    except SQLAlchemyError as exc:
        raise database_unavailable() from exc


@router.put('/editpost/{post_id}')
def edit_post(post_id: int, data: EditPostRequest, db: Session = Depends(get_db)):
    try:
        post = get_post_or_404(post_id, db)
        post.title = data.title
        post.description = data.description
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise database_unavailable() from exc

    return 'post updated'


@router.delete('/deletepost/{post_id}')
def delete_post(post_id: int, db: Session = Depends(get_db)):
    try:
        post = get_post_or_404(post_id, db)
        db.delete(post)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise database_unavailable() from exc

    logger.info('Post %s deleted', post_id)
    return 'post deleted'
