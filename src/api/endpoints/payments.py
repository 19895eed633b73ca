from typing import Union

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt

from src.api.dependencies import get_payments_client
from src.integrations.clients.real_http.airtel_payments import AirtelPaymentsClient
from src.integrations.contracts.payments import PaymentRequest

api = APIRouter()
payments_api = api


class PaymentInitiateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    phone_number: str = Field(..., alias="phoneNumber", description="Subscriber MSISDN to receive the payment prompt")
    amount: Union[StrictInt, StrictFloat] = Field(..., description="Amount in the configured currency")
    reference: str = Field(..., description="Caller reference, passed to Airtel unchanged")


@api.post("/pay", tags=["Payments"])
async def initiate_payment(
    request: PaymentInitiateRequest,
    client: AirtelPaymentsClient = Depends(get_payments_client),
):
    payment_request = PaymentRequest(
        phone_number=request.phone_number,
        amount=request.amount,
        reference=request.reference,
    )
    try:
        return await client.initiate_payment(payment_request)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
