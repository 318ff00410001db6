"""
Report composer for the 摸鱼办 reminder.
Builds the copyable status text from the countdown engine's results.
"""

import random
from datetime import datetime, time
from typing import Optional, Sequence

from config import Settings
from countdown import (
    Instant,
    day_of_year,
    format_date,
    holiday_countdowns,
    payday_countdowns,
    weekday_name,
    weekend_countdowns,
    year_end_countdowns,
)

HEADER = "【摸鱼办】提醒您："
PLACEHOLDERS = ("{date}", "{weekday}", "{greeting}")

# Opening lines; each placeholder appears at most once per template
OPENING_TEMPLATES = (
    "今天是{date}，{weekday}。{greeting}，摸鱼人！工作再忙也要记得休息，毕竟身体是革命的本钱。",
    "欢迎来到{date}的摸鱼时间！{greeting}，今天也要合理安排工作与休息哦！",
    "{greeting}，摸鱼人！今天是{date}，{weekday}。记得多喝水，多走动，保持健康工作状态。",
    "【摸鱼办】提醒您：{date}，{weekday}。{greeting}！工作再努力，也别忘了给自己放个小假。",
    "美好的一天从摸鱼开始！今天是{date}，{weekday}。{greeting}，愿您工作顺利，摸鱼愉快！",
    "{greeting}，今天是{date}，{weekday}。摸鱼小贴士：每小时起身活动5分钟，健康工作每一天。",
    "【摸鱼办】温馨提示：{date}，{weekday}。{greeting}！适当摸鱼有助于提高工作效率哦！",
    "今天是{date}，{weekday}。{greeting}，摸鱼人！记得劳逸结合，才能事半功倍。",
    "又是一天摸鱼日！{date}，{weekday}，{greeting}！让我们在忙碌工作中寻找小确幸。",
    "时间过得真快，今天是{date}，{weekday}。{greeting}，摸鱼人！享受此刻的宁静时光吧。",
    "{greeting}！今天是{date}，{weekday}。摸鱼办提醒您：适时休息，保持高效工作状态。",
    "欢迎来到{date}的摸鱼时刻！{greeting}，今天也要元气满满地工作与生活哦！",
    "早安摸鱼人！今天是{date}，{weekday}。新的一天，愿你工作轻松，摸鱼愉快！",
    "{greeting}！{date}，{weekday}。摸鱼办温馨提示：工作再忙，也别忘了抬头看看窗外的风景。",
    "今天是{date}，{weekday}。{greeting}！摸鱼人必备心态：工作是做不完的，但生活还要继续。",
    "【摸鱼办】报道：{date}，{weekday}。{greeting}！今日摸鱼指数：★★★★☆，适合轻度摸鱼。",
    "又是元气满满的一天！今天是{date}，{weekday}。{greeting}，摸鱼人！记得微笑面对工作挑战。",
    "{greeting}，摸鱼人！{date}，{weekday}。今日宜摸鱼，忌过度劳累，保持好心情最重要。",
    "今天是{date}，{weekday}。{greeting}！摸鱼办提醒您：合理分配时间，工作娱乐两不误。",
    "欢迎来到{date}的摸鱼频道！{greeting}，今天也是努力工作和适当摸鱼的一天！",
    "{greeting}，今天是{date}，{weekday}。摸鱼小技巧：把大任务分解成小目标，逐个击破。",
    "今天是{date}，{weekday}。{greeting}，摸鱼人！愿您的工作像咖啡一样香醇，摸鱼像甜点一样美好。",
    "【摸鱼办】温馨提示：{date}，{weekday}。{greeting}！久坐伤腰，记得定时起身活动哦。",
    "新的一天，新的摸鱼计划！今天是{date}，{weekday}。{greeting}，摸鱼人！加油！",
    "{greeting}！今天是{date}，{weekday}。摸鱼办祝您工作顺利，摸鱼愉快，度过美好的一天！",
    "今天是{date}，{weekday}。{greeting}，摸鱼人！工作再忙，也要给自己留一点放空的时间。",
    "【摸鱼办】特别报道：{date}，{weekday}。{greeting}！今日宜摸鱼，宜放松，宜微笑。",
    "{greeting}，摸鱼人！今天是{date}，{weekday}。记得工作再忙也要按时吃饭，保持健康作息。",
    "今天是{date}，{weekday}。{greeting}！摸鱼办提醒您：保持积极心态，工作再累也不怕。",
    "欢迎来到{date}的摸鱼小天地！{greeting}，愿您今天工作轻松，摸鱼愉快！",
)

HEALTH_TIPS = (
    "有事没事起身去茶水间，去厕所，去廊道走走，别总在工位上坐着，钱是老板的，但健康是自己的。",
    "久坐伤身，每工作1小时，请起来活动5分钟，保护颈椎和腰椎。",
    "多喝水，少熬夜，保持良好作息，才能更高效地摸鱼。",
    "工作间隙，记得眺望远处，让眼睛休息一下，保护视力很重要。",
    "适当伸展四肢，活动颈部，避免长时间保持同一姿势导致肌肉僵硬。",
    "记得定时喝水，成年人每天应摄入1500-2000ml水，保持身体水分平衡。",
    "工作再忙，也别忘了按时吃饭，营养均衡是高效工作的基础。",
    "摸鱼也要讲究方法，合理安排时间，劳逸结合才是王道。",
    "压力过大时，深呼吸几次，闭目养神片刻，让大脑得到短暂休息。",
    "记得保持良好坐姿，挺直腰背，避免长期弯腰驼背导致脊椎问题。",
)

FISHING_INDEXES = (
    "★★★★★ 今日摸鱼指数爆表，适合大胆摸鱼",
    "★★★★☆ 今日摸鱼指数较高，适合适度摸鱼",
    "★★★☆☆ 今日摸鱼指数一般，建议谨慎摸鱼",
    "★★★★☆ 今日摸鱼指数良好，工作之余别忘放松",
    "★★★★★ 绝佳摸鱼日，把握机会，快乐摸鱼",
    "★★★☆☆ 摸鱼难度中等，需要一定技巧",
    "★★★★☆ 摸鱼环境良好，可以放心摸鱼",
    "★★★★★ 天时地利人和，摸鱼绝佳时机",
)


class SelectionStrategy:
    """Picks one entry of a text pool for a reference instant."""

    def pick(self, pool: Sequence[str], instant: datetime) -> str:
        raise NotImplementedError


class RandomSelection(SelectionStrategy):
    """Uniform random pick on every render."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def pick(self, pool: Sequence[str], instant: datetime) -> str:
        return self._rng.choice(pool)


class DayOfYearHash(SelectionStrategy):
    """Same pick for the whole calendar day, usually a different one the next day."""

    def __init__(self, multiplier: int = 31):
        self.multiplier = multiplier

    def pick(self, pool: Sequence[str], instant: datetime) -> str:
        return pool[(day_of_year(instant) * self.multiplier) % len(pool)]


def make_strategy(name: str) -> SelectionStrategy:
    """Map a configured strategy name ('random' or 'day_of_year') to a strategy."""
    if name == 'random':
        return RandomSelection()
    if name == 'day_of_year':
        return DayOfYearHash()
    raise ValueError(f"Unknown opening strategy: {name!r}")


def greeting(instant: datetime) -> str:
    """Greeting for the time of day."""
    if instant.hour < 12:
        return "早上好"
    if instant.hour < 18:
        return "下午好"
    return "晚上好"


def fill_template(template: str, date_str: str, weekday: str, greeting_str: str) -> str:
    """Replace the first occurrence of each placeholder."""
    values = (date_str, weekday, greeting_str)
    for placeholder, value in zip(PLACEHOLDERS, values):
        template = template.replace(placeholder, value, 1)
    return template


def generate_report(instant: Optional[Instant] = None,
                    strategy: Optional[SelectionStrategy] = None,
                    settings: Optional[Settings] = None) -> str:
    """
    Build the full reminder text.

    Args:
        instant: Reference instant (defaults to now, sampled once)
        strategy: How the opening line, tip and rating are picked
            (defaults to DayOfYearHash)
        settings: Payday table, same-day policies and display options

    Returns:
        Multi-line reminder text
    """
    if instant is None:
        instant = datetime.now()
    elif not isinstance(instant, datetime):
        instant = datetime.combine(instant, time())
    strategy = strategy or DayOfYearHash()
    settings = settings or Settings()

    opening = fill_template(strategy.pick(OPENING_TEMPLATES, instant),
                            format_date(instant), weekday_name(instant), greeting(instant))
    tip = strategy.pick(HEALTH_TIPS, instant)

    paydays = payday_countdowns(instant, settings.paydays, settings.payday_today_is_passed)
    weekends = weekend_countdowns(instant)
    holidays = holiday_countdowns(instant, settings.holiday_limit)
    year_end = year_end_countdowns(instant, settings.lunar_today_is_passed)

    lines = [HEADER, opening, tip, "温馨提示："]
    for label, days in paydays.items():
        lines.append(f"离【{label}号发工资】：{days}天")
    lines.append(f"离【双休周末】还有：{weekends.double_rest}天")
    lines.append(f"离【单休周末】还有：{weekends.single_rest}天")
    for name, days in holidays:
        lines.append(f"距离【 {name} 】还有：{days}天")
    lines.append(f"距离【{instant.year + 1}年】还有：{year_end.next_year}天")
    lines.append(f"距离【下次过年】还有：{year_end.next_lunar_new_year}天")

    if settings.show_rating:
        lines.append("")
        lines.append(strategy.pick(FISHING_INDEXES, instant))

    return "\n".join(lines)
