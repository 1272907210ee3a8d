from fastapi import APIRouter, HTTPException
from app.modules.measurements import ruler
from app.modules.measurements.schemas import (
    RulerResponse, ConvertRequest, ConvertResponse, OffsetRequest, OffsetResponse,
    ScrollRequest, RulerReading, ParseRequest, ParseResponse, ToggleRequest
)

router = APIRouter(prefix="/measurements", tags=["measurements"])


def _reading(state: ruler.RulerState, changed: bool) -> RulerReading:
    return RulerReading(
        value=state.value,
        unit=state.unit,
        offset=state.offset,
        changed=changed,
        input_text=state.input_text,
        display=state.display,
    )


@router.get("/rulers/{unit}", response_model=RulerResponse)
async def get_ruler(unit: str):
    """Ruler geometry for a unit: marks and tick intervals"""
    try:
        selected = ruler.get_ruler(unit)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return RulerResponse(
        unit=selected.unit,
        quantity=selected.quantity,
        canonical_unit=selected.canonical_unit,
        item_width=ruler.RULER_ITEM_WIDTH,
        max_marks=selected.max_marks,
        major_interval=selected.major_interval,
        medium_interval=selected.medium_interval,
        marks=selected.mark_labels(),
    )


@router.post("/convert", response_model=ConvertResponse)
async def convert(request: ConvertRequest):
    try:
        value = ruler.convert(request.value, request.from_unit, request.to_unit)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ConvertResponse(value=value, unit=request.to_unit)


@router.post("/offset", response_model=OffsetResponse)
async def offset_for_value(request: OffsetRequest):
    """Scroll offset for a canonical value"""
    return OffsetResponse(offset=ruler.offset_for_value(request.value, request.unit), unit=request.unit)


@router.post("/value", response_model=RulerReading)
async def value_for_offset(request: ScrollRequest):
    """Apply a scroll offset to a ruler currently showing current_value"""
    state = ruler.RulerState(unit=request.unit, value=request.current_value)
    changed = state.scroll_to(request.offset)
    return _reading(state, changed)


@router.post("/parse", response_model=ParseResponse)
async def parse_input(request: ParseRequest):
    value = ruler.parse_input(request.text, request.unit)
    return ParseResponse(value=value, valid=value is not None)


@router.post("/toggle", response_model=RulerReading)
async def toggle_unit(request: ToggleRequest):
    state = ruler.RulerState(unit=request.unit, value=request.value, is_scrolling=request.is_scrolling)
    state.offset = ruler.offset_for_value(request.value, request.unit)
    try:
        changed = state.toggle_unit(request.new_unit)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _reading(state, changed)
