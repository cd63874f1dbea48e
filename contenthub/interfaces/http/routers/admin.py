"""Administrative overview of all contents."""
from fastapi import APIRouter, Depends

from contenthub.interfaces.http.deps import get_account_service, get_content_service, get_current_admin
from contenthub.modules.accounts import Account, AccountService
from contenthub.modules.contents import ContentService
from contenthub.schemas import AdminStatsResponse, ContentListResponse, ContentResponse, SubjectResponse

router = APIRouter()


@router.get("/contents", response_model=ContentListResponse)
async def admin_list_contents(
    admin: Account = Depends(get_current_admin),
    service: ContentService = Depends(get_content_service),
) -> ContentListResponse:
    contents = await service.list_all()
    return ContentListResponse(
        total=len(contents),
        contents=[ContentResponse.from_domain(content) for content in contents],
    )


@router.get("/stats", response_model=AdminStatsResponse)
async def admin_stats(
    admin: Account = Depends(get_current_admin),
    service: ContentService = Depends(get_content_service),
    account_service: AccountService = Depends(get_account_service),
) -> AdminStatsResponse:
    stats = await service.collect_stats(await account_service.count())
    return AdminStatsResponse(
        total_accounts=stats.total_accounts,
        total_contents=stats.total_contents,
        total_views=stats.total_views,
        published_count=stats.published_count,
        draft_count=stats.draft_count,
        recent_contents=[ContentResponse.from_domain(content) for content in stats.recent_contents],
        top_contents=[ContentResponse.from_domain(content) for content in stats.top_contents],
        subjects=[SubjectResponse.model_validate(subject) for subject in stats.subjects],
    )
