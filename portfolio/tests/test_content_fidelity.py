import pytest

from portfolio.src.content import ABOUT, CONTACT, FOOTER, HERO, PROJECTS, SKILL_CATEGORIES


def _texts(nodes):
    return [n.get_text(strip=True) for n in nodes]


@pytest.mark.content
def test_projects_render_in_order_with_every_field(client, soup):
    cards = soup(client.get("/").data).select('[data-testid="project-card"]')
    assert len(cards) == len(PROJECTS)
    for card, project in zip(cards, PROJECTS):
        assert card.select_one(".project-card__title").get_text(strip=True) == project["title"]
        assert card.select_one(".project-card__desc").get_text(strip=True) == project["description"]
        assert _texts(card.select(".chip")) == project["tech"]
        link = card.select_one("a.btn")
        assert link["href"] == project["github_url"]
        assert link["target"] == "_blank"
        assert "noopener" in link["rel"]


@pytest.mark.content
def test_chat_application_record(client, soup):
    cards = soup(client.get("/").data).select('[data-testid="project-card"]')
    titles = _texts(c.select_one(".project-card__title") for c in cards)
    chat = cards[titles.index("Chat Application")]
    assert titles.index("Chat Application") == 3
    assert _texts(chat.select(".chip")) == ["React", "Socket.io", "Tailwind CSS"]
    assert chat.select_one("a.btn")["href"] == "https://github.com/yash936936/Chat_APP"
    assert "Real-time messaging app using Socket.io and Tailwind CSS." in chat.get_text()


@pytest.mark.content
def test_skills_render_in_order(client, soup):
    cards = soup(client.get("/").data).select('[data-testid="skill-category"]')
    assert _texts(c.select_one("h3") for c in cards) == [c["title"] for c in SKILL_CATEGORIES]
    for card, category in zip(cards, SKILL_CATEGORIES):
        assert _texts(card.select(".chip")) == category["skills"]


@pytest.mark.content
def test_contact_links(client, soup):
    s = soup(client.get("/").data)
    links = s.select('[data-testid="contact-link"]')
    assert [a["href"] for a in links] == [l["href"] for l in CONTACT["links"]]
    assert _texts(s.select(".contact-card__title")) == [l["title"] for l in CONTACT["links"]]
    assert _texts(s.select(".contact-card__value")) == [l["value"] for l in CONTACT["links"]]
    assert links[0]["href"] == "mailto:yashm15082005@gmail.com"
    assert CONTACT["intro"] in s.text
    assert s.select_one(".cta a")["href"] == CONTACT["cta"]["href"]


@pytest.mark.content
def test_hero_about_footer(client, soup):
    s = soup(client.get("/").data)
    assert s.select_one(".hero__name").get_text(strip=True) == HERO["name"]
    assert s.select_one(".hero__title").get_text(strip=True) == HERO["title"]
    assert [a["href"] for a in s.select(".hero__actions a")] == ["#projects", "#contact"]
    assert _texts(s.select(".about__paragraphs p")) == ABOUT["paragraphs"]
    assert _texts(s.select(".highlight h4")) == [h["title"] for h in ABOUT["highlights"]]

    footer = s.select(".footer__links a")
    assert [a["href"] for a in footer] == [l["href"] for l in FOOTER["links"]]
    # web links open in a new tab, mailto does not
    assert footer[0]["target"] == "_blank"
    assert not footer[2].has_attr("target")
    assert FOOTER["copyright"] in s.select_one(".footer__copy").text
