"""The built-in keyword reply table, evaluated top to bottom."""

from __future__ import annotations

from typing import Final

from jukebox_bot.domain.replies.entities import KeywordReply, MatchMode, ReplyMode

_EXACT_REPLY = {"match": MatchMode.EXACT, "mode": ReplyMode.REPLY}

DEFAULT_KEYWORD_REPLIES: Final[tuple[KeywordReply, ...]] = (
    KeywordReply(pattern="跟你說喔", response="小胖胖很可愛🥰"),
    KeywordReply(pattern="哼", response="(把鼓起的臉頰戳下去😉"),
    KeywordReply(pattern="被你氣死", response="不氣不氣~ 小胖胖最好了"),
    KeywordReply(pattern="滾", response="滾地球一圈🌏🌍🌎🌏 我又回來了~"),
    KeywordReply(pattern="臭胖", response="是香胖歐😊"),
    KeywordReply(pattern="死胖子", response="你怎麼忍心🥺"),
    KeywordReply(pattern="胖胖", response="怎麼了小胖胖😀"),
    KeywordReply(pattern="掰", response="掰掰小胖胖👋"),
    KeywordReply(pattern="拜", response="掰掰小胖胖👋"),
    KeywordReply(pattern="喔", response="(搓臉"),
    KeywordReply(pattern="憨", response="肯定不是我呢😀"),
    KeywordReply(pattern="靠", response="Cow是牛喔~"),
    KeywordReply(pattern="蛤", response="蛤蚂在海裡喔，煮湯好喝😋"),
    KeywordReply(pattern="我好可愛", response="小胖胖最可愛了🥰"),
    KeywordReply(pattern="不理我", response="怎麼會不理你呢~小胖胖😉"),
    KeywordReply(pattern="不理你", response="不要不理我拉~小胖胖🥺"),
    KeywordReply(pattern="很痛", response="不痛不痛眼淚是珍珠🥺"),
    KeywordReply(pattern="晚上好", response="晚上好的呢~"),
    KeywordReply(pattern="～～", response="海帶呀海帶～海帶呀海帶～"),
    KeywordReply(pattern="~~", response="海帶呀海帶~海帶呀海帶~"),
    KeywordReply(pattern="廁所", response="小心不要掉到馬桶喔~😉"),
    KeywordReply(pattern="🌚", response="小胖胖太陽曬很多喔😏 要記得擦防曬~"),
    KeywordReply(pattern="嗚嗚", response="嗚~嗚~ 寢強寢強~"),
    KeywordReply(pattern="人渣", response="皮諾可，這個直接電死😡"),
    KeywordReply(pattern="變態", response="誰!? Who!? 蝦郎!? 😮"),
    KeywordReply(pattern="欠打", response="誰!? Who!? 蝦郎!? 😮 肯定不是我😉"),
    KeywordReply(pattern="關麥", response="沒有問題的呢~"),
    KeywordReply(pattern="去樓下", response="沒有問題的呢~"),
    KeywordReply(pattern="洗澡", response="要變香香小胖胖了😊"),
    KeywordReply(pattern="吃東西", response="小胖胖 看看你的肚肚😀"),
    KeywordReply(pattern="等一下", response="等兩下😉"),
    KeywordReply(pattern="等兩下", response="等三下😉"),
    KeywordReply(pattern="嘴邊肉", response="的特好捏呢😊", mode=ReplyMode.REPLY),
    KeywordReply(pattern="胖子", response="很瘦的呦~", **_EXACT_REPLY),
    KeywordReply(pattern="可愛", response="誰可愛呀😏~", **_EXACT_REPLY),
)
