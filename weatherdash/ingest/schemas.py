"""Wire contracts for the weather API responses.

The API returns many more fields than the dashboard uses; unknown fields
are ignored, missing or mistyped required fields raise ValidationError.
"""

from pydantic import BaseModel, Field

from weatherdash.models.forecast import RawForecast, RawForecastDay
from weatherdash.models.weather import Condition, CurrentConditions, Location


class ConditionPayload(BaseModel):
    text: str
    icon: str = ""
    code: int = 0

    def to_model(self) -> Condition:
        return Condition(text=self.text, icon=self.icon, code=self.code)


class LocationPayload(BaseModel):
    name: str
    country: str
    region: str = ""
    lat: float
    lon: float
    localtime: str = ""

    def to_model(self) -> Location:
        return Location(
            name=self.name,
            country=self.country,
            region=self.region,
            lat=self.lat,
            lon=self.lon,
            localtime=self.localtime,
        )


class CurrentPayload(BaseModel):
    temp_c: float
    temp_f: float
    humidity: int = Field(ge=0, le=100)
    wind_kph: float
    wind_mph: float
    condition: ConditionPayload


class CurrentResponse(BaseModel):
    location: LocationPayload
    current: CurrentPayload

    def to_model(self) -> CurrentConditions:
        c = self.current
        return CurrentConditions(
            temp_c=c.temp_c,
            temp_f=c.temp_f,
            humidity=c.humidity,
            wind_kph=c.wind_kph,
            wind_mph=c.wind_mph,
            condition=c.condition.to_model(),
            location=self.location.to_model(),
        )


class DayPayload(BaseModel):
    maxtemp_c: float
    maxtemp_f: float
    mintemp_c: float
    mintemp_f: float
    condition: ConditionPayload


class ForecastDayPayload(BaseModel):
    date: str
    day: DayPayload


class ForecastBlock(BaseModel):
    forecastday: list[ForecastDayPayload]


class ForecastResponse(BaseModel):
    forecast: ForecastBlock

    def to_model(self) -> RawForecast:
        return RawForecast(
            days=[
                RawForecastDay(
                    date=d.date,
                    maxtemp_c=d.day.maxtemp_c,
                    maxtemp_f=d.day.maxtemp_f,
                    mintemp_c=d.day.mintemp_c,
                    mintemp_f=d.day.mintemp_f,
                    condition_text=d.day.condition.text,
                    condition_icon=d.day.condition.icon,
                    condition_code=d.day.condition.code,
                )
                for d in self.forecast.forecastday
            ]
        )
