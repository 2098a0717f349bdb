from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .models import Activity


class CartLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    activity_id: str
    subject: str
    location: str
    price: float
    image: Optional[str]
    quantity: int

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity

    @classmethod
    def from_activity(cls, *, activity_id: str, activity: Optional[Activity], quantity: int) -> "CartLine":
        if activity is None:
            return cls(
                activity_id=activity_id,
                subject="Unknown activity",
                location="",
                price=0,
                image="",
                quantity=quantity,
            )
        return cls(
            activity_id=activity_id,
            subject=activity.subject,
            location=activity.location,
            price=activity.price,
            image=activity.image,
            quantity=quantity,
        )


class CheckoutDetails(BaseModel):
    name: str = ""
    phone: str = ""
    city: str = ""

    def clear(self) -> None:
        self.name = ""
        self.phone = ""
        self.city = ""


class OrderItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    activity_id: str = Field(alias="lessonId")
    quantity: int = Field(ge=1)


class OrderPayload(BaseModel):
    name: str
    phone: str
    city: str = ""
    items: list[OrderItem]

    @classmethod
    def from_checkout(cls, *, details: CheckoutDetails, lines: list[CartLine]) -> "OrderPayload":
        return cls(
            name=details.name.strip(),
            phone=details.phone.strip(),
            city=details.city.strip(),
            items=[OrderItem(activity_id=line.activity_id, quantity=line.quantity) for line in lines],
        )


class CapacityUpdate(BaseModel):
    spaces: int = Field(ge=0)


class OrderRead(BaseModel):
    order_id: int
    name: str
    phone: str
    city: str
    items: list[OrderItem]
